"""Repository instance models.

Entities and relationships as returned by the repository services, with the
nested ``InstanceProperties`` JSON unwrapped into plain Python values.
"""

from __future__ import annotations

import json
from typing import Any, Mapping

from pydantic import BaseModel, Field

from metadata_fvt.core.exceptions import PropertyServerError
from metadata_fvt.typedefs import QUALIFIED_NAME


def unwrap_property_value(value: Mapping[str, Any] | None) -> Any:
    """Convert one ``InstancePropertyValue`` payload into a Python value."""
    if value is None:
        return None
    if "primitiveValue" in value:
        return value["primitiveValue"]
    if "symbolicName" in value:
        return value["symbolicName"]
    if "arrayValues" in value:
        items = unwrap_instance_properties(value.get("arrayValues"))
        return [items[key] for key in sorted(items, key=_array_index)]
    if "mapValues" in value:
        return unwrap_instance_properties(value.get("mapValues"))
    if "attributes" in value:
        return unwrap_instance_properties(value.get("attributes"))
    return None


def unwrap_instance_properties(payload: Mapping[str, Any] | None) -> dict[str, Any]:
    """Convert an ``InstanceProperties`` payload into a name -> value dict."""
    if not payload:
        return {}
    raw = payload.get("instanceProperties") or {}
    return {name: unwrap_property_value(value) for name, value in raw.items()}


def _require(payload: Any, key: str, kind: str) -> Any:
    """Value of a mandatory field of a repository reply."""
    if not isinstance(payload, Mapping) or payload.get(key) is None:
        raise PropertyServerError(
            f"Malformed {kind} in repository reply: missing '{key}'",
            details={"kind": kind, "missing": key, "payload": payload},
        )
    return payload[key]


def _array_index(key: str) -> int:
    try:
        return int(key)
    except ValueError:
        return 0


def as_string(value: Any) -> str | None:
    """Render a property value the way the platform's valueAsString does."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, dict)):
        return json.dumps(value, default=str)
    return str(value)


class InstanceType(BaseModel):
    type_def_guid: str | None = None
    type_def_name: str | None = None

    @classmethod
    def from_api(cls, payload: Mapping[str, Any] | None) -> "InstanceType":
        payload = payload or {}
        return cls(
            type_def_guid=payload.get("typeDefGUID"),
            type_def_name=payload.get("typeDefName"),
        )


class EntityDetail(BaseModel):
    """A typed metadata record with named properties."""

    guid: str
    type: InstanceType = Field(default_factory=InstanceType)
    properties: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> "EntityDetail":
        return cls(
            guid=_require(payload, "guid", "entity"),
            type=InstanceType.from_api(payload.get("type")),
            properties=unwrap_instance_properties(payload.get("properties")),
        )

    @property
    def type_name(self) -> str | None:
        return self.type.type_def_name

    @property
    def qualified_name(self) -> str | None:
        return self.property_as_string(QUALIFIED_NAME)

    def property_as_string(self, name: str) -> str | None:
        return as_string(self.properties.get(name))


class EntityProxy(BaseModel):
    """One end of a relationship, carrying only the unique properties."""

    guid: str
    type: InstanceType = Field(default_factory=InstanceType)
    unique_properties: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> "EntityProxy":
        return cls(
            guid=_require(payload, "guid", "entity proxy"),
            type=InstanceType.from_api(payload.get("type")),
            unique_properties=unwrap_instance_properties(payload.get("uniqueProperties")),
        )

    @property
    def qualified_name(self) -> str | None:
        return as_string(self.unique_properties.get(QUALIFIED_NAME))


class Relationship(BaseModel):
    """A typed link between two entities, queryable from either end."""

    guid: str
    type: InstanceType = Field(default_factory=InstanceType)
    entity_one_proxy: EntityProxy
    entity_two_proxy: EntityProxy
    properties: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> "Relationship":
        return cls(
            guid=_require(payload, "guid", "relationship"),
            type=InstanceType.from_api(payload.get("type")),
            entity_one_proxy=EntityProxy.from_api(_require(payload, "entityOneProxy", "relationship")),
            entity_two_proxy=EntityProxy.from_api(_require(payload, "entityTwoProxy", "relationship")),
            properties=unwrap_instance_properties(payload.get("properties")),
        )

    @property
    def type_name(self) -> str | None:
        return self.type.type_def_name

    def other_proxy(self, qualified_name: str) -> EntityProxy:
        """The end of this relationship that is not ``qualified_name``."""
        if self.entity_one_proxy.qualified_name == qualified_name:
            return self.entity_two_proxy
        return self.entity_one_proxy
