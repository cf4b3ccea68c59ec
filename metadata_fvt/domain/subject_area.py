"""Subject Area glossary models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class SubjectAreaModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    def to_request(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class Glossary(SubjectAreaModel):
    name: str
    guid: str | None = None
    qualified_name: str | None = None
    description: str | None = None

    def to_request(self) -> dict[str, Any]:
        body = super().to_request()
        body.pop("guid", None)
        return {"class": "Glossary", **body}

    @classmethod
    def from_response(cls, payload: dict[str, Any]) -> "Glossary":
        system = payload.get("systemAttributes") or {}
        return cls(
            name=payload.get("name", ""),
            guid=system.get("guid") or payload.get("guid"),
            qualified_name=payload.get("qualifiedName"),
            description=payload.get("description"),
        )


class SubjectAreaDefinition(SubjectAreaModel):
    """Glossary category subtype grouping the terms of one subject area."""

    name: str
    guid: str | None = None
    qualified_name: str | None = None
    description: str | None = None
    glossary_guid: str | None = None
    parent_category_guid: str | None = None

    def to_request(self) -> dict[str, Any]:
        body: dict[str, Any] = {"class": "SubjectAreaDefinition", "name": self.name}
        if self.qualified_name:
            body["qualifiedName"] = self.qualified_name
        if self.description is not None:
            body["description"] = self.description
        if self.glossary_guid:
            body["glossary"] = {"guid": self.glossary_guid}
        if self.parent_category_guid:
            body["parentCategory"] = {"guid": self.parent_category_guid}
        return body

    @classmethod
    def from_response(cls, payload: dict[str, Any]) -> "SubjectAreaDefinition":
        system = payload.get("systemAttributes") or {}
        glossary = payload.get("glossary") or {}
        parent = payload.get("parentCategory") or {}
        return cls(
            name=payload.get("name", ""),
            guid=system.get("guid") or payload.get("guid"),
            qualified_name=payload.get("qualifiedName"),
            description=payload.get("description"),
            glossary_guid=glossary.get("guid") or glossary.get("relatedEndGuid"),
            parent_category_guid=parent.get("guid") or parent.get("relatedEndGuid"),
        )
