"""Data Engine verification scenarios: submit through the client, verify in the repository."""

from __future__ import annotations

from metadata_fvt.clients.data_engine import DataEngineClient
from metadata_fvt.harness.assertions import RepositoryQueries
from metadata_fvt.harness.verifiers import (
    verify_data_file,
    verify_database,
    verify_lineage_mappings,
    verify_relational_table,
    verify_software_server_capability,
)
from metadata_fvt.setup.data_stores import DataStoreAndRelationalTableSetupService
from metadata_fvt.setup.processes import ProcessSetupService


process_setup_service = ProcessSetupService()
data_store_setup_service = DataStoreAndRelationalTableSetupService()


def register_external_tool(user_id: str, client: DataEngineClient, repository: RepositoryQueries) -> None:
    capability = process_setup_service.create_external_data_engine(user_id, client)
    verify_software_server_capability(repository, capability)


def verify_lineage_mappings_for_a_job_process(
    user_id: str,
    client: DataEngineClient,
    repository: RepositoryQueries,
) -> None:
    process_setup_service.create_external_data_engine(user_id, client)
    process_setup_service.create_job_process_with_content(user_id, client)
    verify_lineage_mappings(
        repository,
        process_setup_service.get_job_process_lineage_mappings_proxies_by_csv_column(),
    )


def upsert_database(user_id: str, client: DataEngineClient, repository: RepositoryQueries) -> None:
    database = data_store_setup_service.upsert_database(user_id, client)
    verify_database(repository, database)


def upsert_relational_table(user_id: str, client: DataEngineClient, repository: RepositoryQueries) -> None:
    relational_table = data_store_setup_service.upsert_relational_table(user_id, client)
    verify_relational_table(repository, relational_table)


def upsert_data_file(user_id: str, client: DataEngineClient, repository: RepositoryQueries) -> None:
    data_file = data_store_setup_service.upsert_data_file(user_id, client)
    verify_data_file(repository, data_file)


DATA_ENGINE_SCENARIOS = {
    "register_external_tool": register_external_tool,
    "verify_lineage_mappings_for_a_job_process": verify_lineage_mappings_for_a_job_process,
    "upsert_database": upsert_database,
    "upsert_relational_table": upsert_relational_table,
    "upsert_data_file": upsert_data_file,
}
