"""Connection table: the (endpoint, backend variant, identity) tuples a run covers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

import httpx

from metadata_fvt.clients.data_engine import DataEngineClient
from metadata_fvt.clients.repository import RepositoryService
from metadata_fvt.clients.subject_area import SubjectAreaClient
from metadata_fvt.core.config import settings


class BackendVariant(str, Enum):
    """Repository backends; each is served by its own named server."""

    IN_MEMORY = "serverinmem"
    GRAPH = "servergraph"

    @classmethod
    def from_server_name(cls, server_name: str) -> "BackendVariant":
        try:
            return cls(server_name)
        except ValueError:
            raise ValueError(
                f"Unknown server {server_name!r}; expected one of {[v.value for v in cls]}"
            ) from None


@dataclass(frozen=True)
class ConnectionDetails:
    """One run target."""

    endpoint: str
    backend: BackendVariant
    user_id: str

    @property
    def server_name(self) -> str:
        return self.backend.value

    @property
    def id(self) -> str:
        return f"{self.backend.name.lower()}-{self.user_id}"

    def data_engine_client(self, http_client: httpx.Client | None = None) -> DataEngineClient:
        return DataEngineClient(self.server_name, self.endpoint, self.user_id, http_client=http_client)

    def repository_service(self, http_client: httpx.Client | None = None) -> RepositoryService:
        return RepositoryService(self.server_name, self.endpoint, self.user_id, http_client=http_client)

    def subject_area_client(self, http_client: httpx.Client | None = None) -> SubjectAreaClient:
        return SubjectAreaClient(self.server_name, self.endpoint, self.user_id, http_client=http_client)


def build_connection_table(
    endpoint: str,
    user_id: str,
    backends: Iterable[BackendVariant | str] = tuple(BackendVariant),
) -> list[ConnectionDetails]:
    """Enumerate one connection per backend variant."""
    table = []
    for backend in backends:
        variant = backend if isinstance(backend, BackendVariant) else BackendVariant.from_server_name(backend)
        table.append(ConnectionDetails(endpoint=endpoint.rstrip("/"), backend=variant, user_id=user_id))
    return table


def default_connection_table() -> list[ConnectionDetails]:
    """Connection table from the harness settings."""
    return build_connection_table(settings.platform_url, settings.user_id, settings.server_names)
