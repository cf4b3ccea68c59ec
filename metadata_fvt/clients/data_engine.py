"""Data Engine access service client."""

from __future__ import annotations

from typing import Any

from metadata_fvt.clients.base import PlatformClient
from metadata_fvt.core.config import settings
from metadata_fvt.core.exceptions import PropertyServerError
from metadata_fvt.core.logging import get_logger
from metadata_fvt.domain.data_engine import (
    Database,
    DataFile,
    LineageMapping,
    Process,
    RelationalTable,
    SoftwareServerCapability,
)


logger = get_logger("clients.data_engine")


class DataEngineClient(PlatformClient):
    """Submits metadata on behalf of an external data engine.

    Every upsert after registration is attributed to the registered engine
    through ``external_source_name``.
    """

    service_path = "open-metadata/access-services/data-engine"

    def __init__(self, *args: Any, external_source_name: str | None = None, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.external_source_name = external_source_name or settings.external_source_name

    def register_data_engine(self, capability: SoftwareServerCapability) -> str:
        body = self._post(
            "registration",
            {"softwareServerCapability": capability.to_request()},
        )
        self.external_source_name = capability.qualified_name
        guid = _guid(body, "registration")
        logger.info(f"Registered data engine {capability.qualified_name} ({guid})")
        return guid

    def upsert_database(self, database: Database) -> str:
        body = self._post(
            "databases",
            {"database": database.to_request(), "externalSourceName": self.external_source_name},
        )
        return _guid(body, "databases")

    def upsert_relational_table(self, relational_table: RelationalTable, database_qualified_name: str) -> str:
        body = self._post(
            "relational-tables",
            {
                "databaseQualifiedName": database_qualified_name,
                "relationalTable": relational_table.to_request(),
                "externalSourceName": self.external_source_name,
            },
        )
        return _guid(body, "relational-tables")

    def upsert_data_file(self, data_file: DataFile) -> str:
        body = self._post(
            "data-files",
            {"dataFile": data_file.to_request(), "externalSourceName": self.external_source_name},
        )
        return _guid(body, "data-files")

    def create_or_update_processes(self, processes: list[Process]) -> list[str]:
        body = self._post(
            "processes",
            {
                "processes": [process.to_request() for process in processes],
                "externalSourceName": self.external_source_name,
            },
        )
        guids = body.get("guids")
        if not isinstance(guids, list) or len(guids) != len(processes):
            raise PropertyServerError(
                message="Process upsert returned an unexpected number of GUIDs",
                details={"expected": len(processes), "response": body},
            )
        return guids

    def add_lineage_mappings(self, lineage_mappings: list[LineageMapping]) -> None:
        self._post(
            "lineage-mappings",
            {
                "lineageMappings": [mapping.to_request() for mapping in lineage_mappings],
                "externalSourceName": self.external_source_name,
            },
        )


def _guid(body: dict[str, Any], operation: str) -> str:
    guid = body.get("guid")
    if not guid:
        raise PropertyServerError(
            message=f"{operation} response carried no GUID",
            details={"response": body},
        )
    return str(guid)
