"""
Data Engine FVT - Submit metadata through Data Engine and verify the repository.

Each scenario:
1. Registers or upserts entities through the Data Engine service
2. Looks them up through the repository services by qualified name
3. Compares persisted properties and derived entities with what was sent

Every scenario runs once per connection (backend variant) so the in-memory
and graph repositories are held to the same expectations.
"""

from __future__ import annotations

import pytest

from metadata_fvt.clients.data_engine import DataEngineClient
from metadata_fvt.clients.repository import RepositoryService
from metadata_fvt.scenarios import data_engine as scenarios
from system_tests.config import get_config


CONNECTIONS = get_config().connection_table()


@pytest.mark.parametrize("connection", CONNECTIONS, ids=lambda c: c.id)
class TestDataEngineFVT:
    """Data Engine scenarios against every backend variant."""

    def test_register_external_tool(
        self,
        user_id: str,
        data_engine_client: DataEngineClient,
        repository_service: RepositoryService,
    ):
        """Registered engine is persisted as a SoftwareServerCapability."""
        scenarios.register_external_tool(user_id, data_engine_client, repository_service)

    def test_verify_lineage_mappings_for_a_job_process(
        self,
        user_id: str,
        data_engine_client: DataEngineClient,
        repository_service: RepositoryService,
    ):
        """Each CSV column's lineage chain links every attribute to its neighbours."""
        scenarios.verify_lineage_mappings_for_a_job_process(user_id, data_engine_client, repository_service)

    def test_upsert_database(
        self,
        user_id: str,
        data_engine_client: DataEngineClient,
        repository_service: RepositoryService,
    ):
        """Database and its deployed schema are persisted."""
        scenarios.upsert_database(user_id, data_engine_client, repository_service)

    def test_upsert_relational_table(
        self,
        user_id: str,
        data_engine_client: DataEngineClient,
        repository_service: RepositoryService,
    ):
        """Table, its column and the schema chain up to the deployed schema are persisted."""
        scenarios.upsert_relational_table(user_id, data_engine_client, repository_service)

    def test_upsert_data_file(
        self,
        user_id: str,
        data_engine_client: DataEngineClient,
        repository_service: RepositoryService,
    ):
        """Data file, its tabular schema and column are persisted."""
        scenarios.upsert_data_file(user_id, data_engine_client, repository_service)

    def test_upsert_database_is_idempotent(
        self,
        user_id: str,
        data_engine_client: DataEngineClient,
        repository_service: RepositoryService,
    ):
        """Upserting the same database twice still leaves exactly one entity."""
        scenarios.upsert_database(user_id, data_engine_client, repository_service)
        scenarios.upsert_database(user_id, data_engine_client, repository_service)
