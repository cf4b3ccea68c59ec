"""Repository services query client used by the assertion harness."""

from __future__ import annotations

from typing import Any, Iterable

from metadata_fvt.clients.base import PlatformClient
from metadata_fvt.core.config import settings
from metadata_fvt.core.exceptions import EntityNotKnownError
from metadata_fvt.core.logging import get_logger
from metadata_fvt.domain.instances import EntityDetail, Relationship
from metadata_fvt.typedefs import LINEAGE_MAPPING


logger = get_logger("clients.repository")


def exact_match_regex(value: str) -> str:
    """Search criteria matching ``value`` literally."""
    return f"\\Q{value}\\E"


class RepositoryService(PlatformClient):
    """Read-only view of the metadata repository behind a server."""

    service_path = "open-metadata/repository-services"

    def __init__(self, *args: Any, page_size: int | None = None, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.page_size = page_size or settings.page_size

    def find_entity_by_property_value(self, type_guid: str | None, value: str) -> list[EntityDetail]:
        """Entities of ``type_guid`` (any type when None) with a property equal to ``value``."""
        request: dict[str, Any] = {
            "class": "EntityPropertyFindRequest",
            "searchCriteria": exact_match_regex(value),
            "offset": 0,
            "pageSize": self.page_size,
        }
        if type_guid:
            request["typeGUID"] = type_guid
        body = self._post("instances/entities/by-property-value", request)
        entities = [EntityDetail.from_api(item) for item in body.get("entities") or []]
        logger.debug(f"Found {len(entities)} entities of type {type_guid} matching {value!r}")
        return entities

    def find_entity_guid_by_qualified_name(self, qualified_name: str) -> str:
        for entity in self.find_entity_by_property_value(None, qualified_name):
            if entity.qualified_name == qualified_name:
                return entity.guid
        raise EntityNotKnownError(
            message=f"No entity with qualified name {qualified_name}",
            details={"qualifiedName": qualified_name, "server": self.server_name},
        )

    def find_relationships_by_guid(self, entity_guid: str) -> list[Relationship]:
        body = self._post(
            f"instances/entity/{entity_guid}/relationships",
            {"class": "TypeLimitedFindRequest", "offset": 0, "pageSize": self.page_size},
        )
        return [Relationship.from_api(item) for item in body.get("relationships") or []]

    def get_related_entities(self, entity_guid: str, type_guid: str) -> list[EntityDetail]:
        """Entities of ``type_guid`` reachable from ``entity_guid`` through any relationships."""
        body = self._post(
            f"instances/related-entities/{entity_guid}",
            {
                "class": "RelatedEntitiesFindRequest",
                "entityTypeGUIDs": [type_guid],
                "offset": 0,
                "pageSize": self.page_size,
            },
        )
        return [EntityDetail.from_api(item) for item in body.get("entities") or []]

    @staticmethod
    def get_lineage_mappings_proxies_qualified_names(
        relationships: Iterable[Relationship],
        qualified_name: str,
    ) -> list[str]:
        """Qualified names at the far end of each lineage mapping of ``qualified_name``."""
        names = []
        for relationship in relationships:
            if relationship.type_name != LINEAGE_MAPPING:
                continue
            other = relationship.other_proxy(qualified_name).qualified_name
            if other is not None:
                names.append(other)
        return names
