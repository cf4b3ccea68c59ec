"""Setup invokers for the external data engine and the job process scenario.

The job process copies a CSV file into a database table through three
stages (read, transform, write) wrapped by a parent job. Every CSV column
yields one lineage chain:

    csv column -> read::in -> read::out -> transform::in -> transform::out
               -> write::in -> write::out -> table column
"""

from __future__ import annotations

from metadata_fvt.clients.data_engine import DataEngineClient
from metadata_fvt.core.logging import get_logger
from metadata_fvt.domain.data_engine import (
    Attribute,
    Database,
    DataFile,
    LineageMapping,
    PortAlias,
    PortImplementation,
    Process,
    RelationalColumn,
    RelationalTable,
    SchemaType,
    SoftwareServerCapability,
    TabularColumn,
)


logger = get_logger("setup.processes")


CSV_COLUMNS = ["id", "first_name", "last_name", "location"]
STAGES = ["read", "transform", "write"]

JOB_QUALIFIED_NAME = "(process)=employee-load-job"
SOURCE_FILE_QUALIFIED_NAME = "(host)=fvt-host::(data_file)=/data/employees.csv"
TARGET_DATABASE_QUALIFIED_NAME = "(host)=fvt-host::(database)=hr"
TARGET_TABLE_QUALIFIED_NAME = f"{TARGET_DATABASE_QUALIFIED_NAME}::(database_table)=employees"


def source_column_name(column: str) -> str:
    return f"{SOURCE_FILE_QUALIFIED_NAME}::(tabular_column)={column}"


def target_column_name(column: str) -> str:
    return f"{TARGET_TABLE_QUALIFIED_NAME}::(database_column)={column}"


def stage_process_name(stage: str) -> str:
    return f"{JOB_QUALIFIED_NAME}::(process)={stage}"


def stage_port_name(stage: str, direction: str) -> str:
    return f"{stage_process_name(stage)}::(port)={direction}"


def stage_attribute_name(stage: str, direction: str, column: str) -> str:
    return f"{stage_port_name(stage, direction)}::(attribute)={column}"


def build_external_data_engine() -> SoftwareServerCapability:
    return SoftwareServerCapability(
        qualified_name="DataEngine",
        name="Data Engine FVT",
        description="External data engine registered by the functional verification tests",
        engine_type="DataEngine",
        engine_version="1",
        patch_level="0",
        source="fvt",
    )


def build_lineage_chains() -> dict[str, list[str]]:
    """Ordered attribute qualified names per CSV column."""
    chains = {}
    for column in CSV_COLUMNS:
        chain = [source_column_name(column)]
        for stage in STAGES:
            chain.append(stage_attribute_name(stage, "in", column))
            chain.append(stage_attribute_name(stage, "out", column))
        chain.append(target_column_name(column))
        chains[column] = chain
    return chains


def _port(stage: str, direction: str) -> PortImplementation:
    port_name = stage_port_name(stage, direction)
    return PortImplementation(
        qualified_name=port_name,
        display_name=f"{stage}-{direction}",
        port_type="INPUT_PORT" if direction == "in" else "OUTPUT_PORT",
        schema_type=SchemaType(
            qualified_name=f"{port_name}::(schema)",
            display_name=f"{stage}-{direction}-schema",
            attribute_list=[
                Attribute(
                    qualified_name=stage_attribute_name(stage, direction, column),
                    display_name=column,
                    position=position,
                )
                for position, column in enumerate(CSV_COLUMNS)
            ],
        ),
    )


def build_stage_process(stage: str, owner: str) -> Process:
    """One stage with an input and an output port mapped column to column."""
    return Process(
        qualified_name=stage_process_name(stage),
        name=stage,
        display_name=f"{stage} stage",
        description=f"{stage} stage of the employee load job",
        owner=owner,
        port_implementations=[_port(stage, "in"), _port(stage, "out")],
        lineage_mappings=[
            LineageMapping(
                source_attribute=stage_attribute_name(stage, "in", column),
                target_attribute=stage_attribute_name(stage, "out", column),
            )
            for column in CSV_COLUMNS
        ],
    )


def build_job_process(owner: str) -> Process:
    return Process(
        qualified_name=JOB_QUALIFIED_NAME,
        name="employee-load-job",
        display_name="Employee load job",
        description="Loads the employee CSV file into the hr database",
        owner=owner,
        port_aliases=[
            PortAlias(
                qualified_name=f"{JOB_QUALIFIED_NAME}::(port)=in",
                display_name="job-in",
                port_type="INPUT_PORT",
                delegates_to=stage_port_name(STAGES[0], "in"),
            ),
            PortAlias(
                qualified_name=f"{JOB_QUALIFIED_NAME}::(port)=out",
                display_name="job-out",
                port_type="OUTPUT_PORT",
                delegates_to=stage_port_name(STAGES[-1], "out"),
            ),
        ],
    )


def build_source_file() -> DataFile:
    return DataFile(
        qualified_name=SOURCE_FILE_QUALIFIED_NAME,
        display_name="employees.csv",
        description="Employee extract",
        file_type="CSV",
        path_name="/data/employees.csv",
        columns=[
            TabularColumn(qualified_name=source_column_name(column), display_name=column, position=position)
            for position, column in enumerate(CSV_COLUMNS)
        ],
    )


def build_target_database() -> Database:
    return Database(
        qualified_name=TARGET_DATABASE_QUALIFIED_NAME,
        display_name="hr",
        description="Human resources database",
        database_type="PostgreSQL",
    )


def build_target_table() -> RelationalTable:
    return RelationalTable(
        qualified_name=TARGET_TABLE_QUALIFIED_NAME,
        display_name="employees",
        description="Employees loaded from the CSV extract",
        columns=[
            RelationalColumn(qualified_name=target_column_name(column), display_name=column, position=position)
            for position, column in enumerate(CSV_COLUMNS)
        ],
    )


def build_boundary_lineage_mappings() -> list[LineageMapping]:
    """Mappings that cross a data store or a stage boundary."""
    mappings = []
    for chain in build_lineage_chains().values():
        # in->out pairs inside a stage belong to the stage process itself
        for index in range(0, len(chain) - 1, 2):
            mappings.append(LineageMapping(source_attribute=chain[index], target_attribute=chain[index + 1]))
    return mappings


class ProcessSetupService:
    """Registers the data engine and submits the job process scenario."""

    def create_external_data_engine(self, user_id: str, client: DataEngineClient) -> SoftwareServerCapability:
        capability = build_external_data_engine()
        client.register_data_engine(capability)
        logger.info(f"{user_id} registered external data engine {capability.qualified_name}")
        return capability

    def create_job_process_with_content(self, user_id: str, client: DataEngineClient) -> list[Process]:
        """Submit the data stores, the stage and job processes, then the boundary lineage."""
        client.upsert_data_file(build_source_file())
        database = build_target_database()
        client.upsert_database(database)
        client.upsert_relational_table(build_target_table(), database.qualified_name)

        processes = [build_stage_process(stage, user_id) for stage in STAGES]
        processes.append(build_job_process(user_id))
        client.create_or_update_processes(processes)

        mappings = build_boundary_lineage_mappings()
        client.add_lineage_mappings(mappings)
        logger.info(
            f"{user_id} created job process {JOB_QUALIFIED_NAME} with {len(processes)} processes "
            f"and {len(mappings)} boundary lineage mappings"
        )
        return processes

    def get_job_process_lineage_mappings_proxies_by_csv_column(self) -> dict[str, list[str]]:
        return build_lineage_chains()
