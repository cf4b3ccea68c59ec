"""Setup invokers for databases, relational tables and data files."""

from __future__ import annotations

from metadata_fvt.clients.data_engine import DataEngineClient
from metadata_fvt.core.logging import get_logger
from metadata_fvt.domain.data_engine import (
    Database,
    DataFile,
    RelationalColumn,
    RelationalTable,
    TabularColumn,
)


logger = get_logger("setup.data_stores")


DATABASE_QUALIFIED_NAME = "db1-qn"
RELATIONAL_TABLE_QUALIFIED_NAME = "db1-qn::relational-table-qn"
DATA_FILE_QUALIFIED_NAME = "data-file-qn"


def build_database() -> Database:
    return Database(
        qualified_name=DATABASE_QUALIFIED_NAME,
        display_name="db1",
        description="db1 description",
        database_type="DB2",
        database_version="11.5",
        database_instance="db1-instance",
        database_imported_from="db1-imported-from",
    )


def build_relational_table() -> RelationalTable:
    return RelationalTable(
        qualified_name=RELATIONAL_TABLE_QUALIFIED_NAME,
        display_name="relational-table",
        description="relational table description",
        columns=[
            RelationalColumn(
                qualified_name=f"{RELATIONAL_TABLE_QUALIFIED_NAME}::column-qn",
                display_name="column",
                description="column description",
                data_type="varchar",
                position=0,
            ),
        ],
    )


def build_data_file() -> DataFile:
    return DataFile(
        qualified_name=DATA_FILE_QUALIFIED_NAME,
        display_name="data-file",
        description="data file description",
        file_type="CSV",
        path_name="/data/data-file.csv",
        columns=[
            TabularColumn(
                qualified_name=f"{DATA_FILE_QUALIFIED_NAME}::tabular-column-qn",
                display_name="tabular-column",
                description="tabular column description",
                data_type="string",
                position=0,
            ),
        ],
    )


class DataStoreAndRelationalTableSetupService:
    """Submits the data store scenarios and returns what was sent."""

    def upsert_database(self, user_id: str, client: DataEngineClient) -> Database:
        database = build_database()
        client.upsert_database(database)
        logger.info(f"{user_id} upserted database {database.qualified_name}")
        return database

    def upsert_relational_table(self, user_id: str, client: DataEngineClient) -> RelationalTable:
        """Upsert the table, creating the database that contains it first."""
        database = self.upsert_database(user_id, client)
        relational_table = build_relational_table()
        client.upsert_relational_table(relational_table, database.qualified_name)
        logger.info(
            f"{user_id} upserted relational table {relational_table.qualified_name} "
            f"in {database.qualified_name}"
        )
        return relational_table

    def upsert_data_file(self, user_id: str, client: DataEngineClient) -> DataFile:
        data_file = build_data_file()
        client.upsert_data_file(data_file)
        logger.info(f"{user_id} upserted data file {data_file.qualified_name}")
        return data_file
