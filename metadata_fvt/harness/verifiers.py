"""Verifiers for each kind of submitted metadata."""

from __future__ import annotations

from typing import Mapping, Sequence

from metadata_fvt.core.logging import get_logger
from metadata_fvt.domain.data_engine import (
    Database,
    DataFile,
    RelationalTable,
    SoftwareServerCapability,
)
from metadata_fvt.domain.instances import EntityDetail
from metadata_fvt.harness.assertions import (
    RepositoryQueries,
    assert_derived_name,
    assert_entity_properties,
    assert_lineage_chain,
    find_single_entity,
    get_single_related_entity,
)
from metadata_fvt.typedefs import (
    DATABASE_TYPE_GUID,
    DATABASE_VERSION,
    DATAFILE_TYPE_GUID,
    DEPLOYED_DATABASE_SCHEMA_TYPE_GUID,
    DEPLOYED_IMPLEMENTATION_TYPE,
    DESCRIPTION,
    DISPLAY_NAME,
    FILE_TYPE,
    IMPORTED_FROM,
    INSTANCE,
    NAME,
    PATCH_LEVEL,
    QUALIFIED_NAME,
    RELATIONAL_COLUMN_TYPE_GUID,
    RELATIONAL_DB_SCHEMA_TYPE_TYPE_GUID,
    RELATIONAL_TABLE_TYPE_GUID,
    SOFTWARE_SERVER_CAPABILITY_TYPE_GUID,
    SOURCE,
    TABULAR_COLUMN_TYPE_GUID,
    TABULAR_SCHEMA_NAME,
    TABULAR_SCHEMA_TYPE_TYPE_GUID,
    TYPE,
    VERSION,
    deployed_schema_name_for_database,
    deployed_schema_name_for_schema_type,
    tabular_schema_name_for_file,
)


logger = get_logger("harness.verifiers")


def verify_software_server_capability(
    repository: RepositoryQueries,
    capability: SoftwareServerCapability,
) -> EntityDetail:
    entity = find_single_entity(repository, SOFTWARE_SERVER_CAPABILITY_TYPE_GUID, capability.qualified_name)
    assert_entity_properties(
        entity,
        {
            DESCRIPTION: capability.description,
            NAME: capability.name,
            TYPE: capability.engine_type,
            VERSION: capability.engine_version,
            PATCH_LEVEL: capability.patch_level,
            QUALIFIED_NAME: capability.qualified_name,
            SOURCE: capability.source,
        },
    )
    logger.info(f"Verified software server capability {capability.qualified_name}")
    return entity


def verify_database(repository: RepositoryQueries, database: Database) -> EntityDetail:
    """Check the database and the deployed schema created for it."""
    entity = find_single_entity(repository, DATABASE_TYPE_GUID, database.qualified_name)
    assert_entity_properties(
        entity,
        {
            NAME: database.display_name,
            DESCRIPTION: database.description,
            DEPLOYED_IMPLEMENTATION_TYPE: database.database_type,
            DATABASE_VERSION: database.database_version,
            INSTANCE: database.database_instance,
            IMPORTED_FROM: database.database_imported_from,
        },
    )

    schema = get_single_related_entity(repository, entity.guid, DEPLOYED_DATABASE_SCHEMA_TYPE_GUID)
    assert_derived_name(schema, deployed_schema_name_for_database(database.qualified_name))
    logger.info(f"Verified database {database.qualified_name}")
    return entity


def verify_relational_table(repository: RepositoryQueries, relational_table: RelationalTable) -> EntityDetail:
    """Check the table, its schema containers and its first column."""
    entity = find_single_entity(repository, RELATIONAL_TABLE_TYPE_GUID, relational_table.qualified_name)
    assert_entity_properties(
        entity,
        {
            DISPLAY_NAME: relational_table.display_name,
            DESCRIPTION: relational_table.description,
        },
    )

    schema_type = get_single_related_entity(repository, entity.guid, RELATIONAL_DB_SCHEMA_TYPE_TYPE_GUID)
    deployed_schema = get_single_related_entity(repository, entity.guid, DEPLOYED_DATABASE_SCHEMA_TYPE_GUID)
    assert_derived_name(
        deployed_schema,
        deployed_schema_name_for_schema_type(schema_type.property_as_string(QUALIFIED_NAME) or ""),
    )

    if relational_table.columns:
        column = relational_table.columns[0]
        column_entity = find_single_entity(repository, RELATIONAL_COLUMN_TYPE_GUID, column.qualified_name)
        assert_entity_properties(
            column_entity,
            {
                DISPLAY_NAME: column.display_name,
                DESCRIPTION: column.description,
            },
        )
    logger.info(f"Verified relational table {relational_table.qualified_name}")
    return entity


def verify_data_file(repository: RepositoryQueries, data_file: DataFile) -> EntityDetail:
    """Check the file, its tabular schema and its first column."""
    entity = find_single_entity(repository, DATAFILE_TYPE_GUID, data_file.qualified_name)
    assert_entity_properties(
        entity,
        {
            NAME: data_file.display_name,
            QUALIFIED_NAME: data_file.qualified_name,
            DESCRIPTION: data_file.description,
            FILE_TYPE: data_file.file_type,
        },
    )

    schema = get_single_related_entity(repository, entity.guid, TABULAR_SCHEMA_TYPE_TYPE_GUID)
    assert_entity_properties(
        schema,
        {
            NAME: TABULAR_SCHEMA_NAME,
            QUALIFIED_NAME: tabular_schema_name_for_file(entity.property_as_string(QUALIFIED_NAME) or ""),
        },
    )

    if data_file.columns:
        column = data_file.columns[0]
        column_entity = find_single_entity(repository, TABULAR_COLUMN_TYPE_GUID, column.qualified_name)
        assert_entity_properties(
            column_entity,
            {
                DISPLAY_NAME: column.display_name,
                DESCRIPTION: column.description,
            },
        )
    logger.info(f"Verified data file {data_file.qualified_name}")
    return entity


def verify_lineage_mappings(repository: RepositoryQueries, chains: Mapping[str, Sequence[str]]) -> None:
    """Check every column's lineage chain."""
    for column, attributes in chains.items():
        assert_lineage_chain(repository, attributes)
        logger.info(f"Verified lineage chain for {column} ({len(attributes)} attributes)")
