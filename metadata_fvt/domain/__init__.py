"""Domain models for submitted metadata and repository instances.

Usage:
    from metadata_fvt.domain import Database, EntityDetail

    database = Database(qualified_name="db1-qn", display_name="db1")
    body = database.to_request()
"""

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
from metadata_fvt.domain.instances import (
    EntityDetail,
    EntityProxy,
    InstanceType,
    Relationship,
)
from metadata_fvt.domain.subject_area import (
    Glossary,
    SubjectAreaDefinition,
)

__all__ = [
    # Data Engine
    "Attribute",
    "Database",
    "DataFile",
    "LineageMapping",
    "PortAlias",
    "PortImplementation",
    "Process",
    "RelationalColumn",
    "RelationalTable",
    "SchemaType",
    "SoftwareServerCapability",
    "TabularColumn",
    # Repository instances
    "EntityDetail",
    "EntityProxy",
    "InstanceType",
    "Relationship",
    # Subject Area
    "Glossary",
    "SubjectAreaDefinition",
]
