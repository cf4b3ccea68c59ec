"""Subject Area access service client (glossaries and subject area definitions)."""

from __future__ import annotations

from typing import Any

from metadata_fvt.clients.base import PlatformClient
from metadata_fvt.core.exceptions import PropertyServerError
from metadata_fvt.domain.subject_area import Glossary, SubjectAreaDefinition


class SubjectAreaClient(PlatformClient):
    service_path = "open-metadata/access-services/subject-area"

    def create_glossary(self, glossary: Glossary) -> Glossary:
        body = self._post("glossaries", glossary.to_request())
        return Glossary.from_response(_single_result(body))

    def get_glossary(self, guid: str) -> Glossary:
        return Glossary.from_response(_single_result(self._get(f"glossaries/{guid}")))

    def delete_glossary(self, guid: str, purge: bool = False) -> None:
        self._delete(f"glossaries/{guid}", params={"isPurge": str(purge).lower()})

    def create_subject_area_definition(self, definition: SubjectAreaDefinition) -> SubjectAreaDefinition:
        body = self._post("subject-area-definitions", definition.to_request())
        return SubjectAreaDefinition.from_response(_single_result(body))

    def get_subject_area_definition(self, guid: str) -> SubjectAreaDefinition:
        body = self._get(f"subject-area-definitions/{guid}")
        return SubjectAreaDefinition.from_response(_single_result(body))

    def update_subject_area_definition(
        self,
        guid: str,
        definition: SubjectAreaDefinition,
        replace: bool = False,
    ) -> SubjectAreaDefinition:
        body = self._put(
            f"subject-area-definitions/{guid}",
            definition.to_request(),
            params={"isReplace": str(replace).lower()},
        )
        return SubjectAreaDefinition.from_response(_single_result(body))

    def delete_subject_area_definition(self, guid: str, purge: bool = False) -> None:
        self._delete(f"subject-area-definitions/{guid}", params={"isPurge": str(purge).lower()})


def _single_result(body: dict[str, Any]) -> dict[str, Any]:
    result = body.get("result")
    if not isinstance(result, list) or len(result) != 1 or not isinstance(result[0], dict):
        raise PropertyServerError(
            message="Expected exactly one result from the subject area service",
            details={"response": body},
        )
    return result[0]
