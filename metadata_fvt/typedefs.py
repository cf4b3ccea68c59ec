"""Open metadata type identifiers and property names checked by the harness."""

# Entity type GUIDs
SOFTWARE_SERVER_CAPABILITY_TYPE_GUID = "fe30a033-8f86-4d17-8986-e6166fa24177"
DATABASE_TYPE_GUID = "0921c83f-b2db-4086-a52c-0d10e52ca078"
DATAFILE_TYPE_GUID = "10752b4a-4b5d-4519-9eae-fdd6d162122f"
TABULAR_COLUMN_TYPE_GUID = "d81a0425-4e9b-4f31-bc1c-e18c3566da10"
RELATIONAL_TABLE_TYPE_GUID = "ce7e72b8-396a-4013-8688-f9d973067425"
RELATIONAL_COLUMN_TYPE_GUID = "aa8d5470-6dbc-4648-9e2f-045e5df9d2f9"
RELATIONAL_DB_SCHEMA_TYPE_TYPE_GUID = "f20f5f45-1afb-41c1-9a09-34d8812626a4"
DEPLOYED_DATABASE_SCHEMA_TYPE_GUID = "eab811ec-556a-45f1-9091-bc7ac8face0f"
TABULAR_SCHEMA_TYPE_TYPE_GUID = "248975ec-8019-4b8a-9caf-084c8b724233"

# Entity type names, keyed by GUID
TYPE_NAMES = {
    SOFTWARE_SERVER_CAPABILITY_TYPE_GUID: "SoftwareServerCapability",
    DATABASE_TYPE_GUID: "Database",
    DATAFILE_TYPE_GUID: "DataFile",
    TABULAR_COLUMN_TYPE_GUID: "TabularColumn",
    RELATIONAL_TABLE_TYPE_GUID: "RelationalTable",
    RELATIONAL_COLUMN_TYPE_GUID: "RelationalColumn",
    RELATIONAL_DB_SCHEMA_TYPE_TYPE_GUID: "RelationalDBSchemaType",
    DEPLOYED_DATABASE_SCHEMA_TYPE_GUID: "DeployedDatabaseSchema",
    TABULAR_SCHEMA_TYPE_TYPE_GUID: "TabularSchemaType",
}

# Relationship type names
LINEAGE_MAPPING = "LineageMapping"

# Property names
DESCRIPTION = "description"
NAME = "name"
TYPE = "type"
VERSION = "version"
PATCH_LEVEL = "patchLevel"
QUALIFIED_NAME = "qualifiedName"
DISPLAY_NAME = "displayName"
SOURCE = "source"
FILE_TYPE = "fileType"
DEPLOYED_IMPLEMENTATION_TYPE = "deployedImplementationType"
DATABASE_VERSION = "databaseVersion"
INSTANCE = "instance"
IMPORTED_FROM = "importedFrom"

# Derived schema naming
DATABASE_SCHEMA_SUFFIX = ":schema"
DATA_FILE_SCHEMA_SUFFIX = "::schema"
SCHEMA_OF_PREFIX = "SchemaOf:"
TABULAR_SCHEMA_NAME = "Schema"


def deployed_schema_name_for_database(database_qualified_name: str) -> str:
    """Qualified name of the deployed schema created for a database."""
    return database_qualified_name + DATABASE_SCHEMA_SUFFIX


def deployed_schema_name_for_schema_type(schema_type_qualified_name: str) -> str:
    """Qualified name of the deployed schema owning a relational schema type."""
    return SCHEMA_OF_PREFIX + schema_type_qualified_name


def tabular_schema_name_for_file(data_file_qualified_name: str) -> str:
    """Qualified name of the tabular schema type created for a data file."""
    return data_file_qualified_name + DATA_FILE_SCHEMA_SUFFIX
