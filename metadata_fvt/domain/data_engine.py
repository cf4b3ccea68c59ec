"""Data Engine request models.

Type-safe representations of the metadata a data engine submits: its own
capability, data stores with their columns, and job processes with ports and
lineage mappings. Serialised with camelCase aliases to match the REST API.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class DataEngineModel(BaseModel):
    """Base model with camelCase wire names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_request(self) -> dict[str, Any]:
        """Serialise for a request body, omitting unset optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class SoftwareServerCapability(DataEngineModel):
    """The external data engine registered as the source of submitted metadata."""

    qualified_name: str = Field(..., description="Globally unique within the type")
    name: str | None = None
    description: str | None = None
    engine_type: str | None = None
    engine_version: str | None = None
    patch_level: str | None = None
    source: str | None = None


class Attribute(DataEngineModel):
    """Column-like attribute owned by a table, file or port schema."""

    qualified_name: str
    display_name: str | None = None
    description: str | None = None
    data_type: str | None = None
    position: int = Field(default=0, ge=0)


class RelationalColumn(Attribute):
    """Column of a relational table."""


class TabularColumn(Attribute):
    """Column of a delimited data file."""


class Database(DataEngineModel):
    qualified_name: str
    display_name: str | None = None
    description: str | None = None
    database_type: str | None = None
    database_version: str | None = None
    database_instance: str | None = None
    database_imported_from: str | None = None


class RelationalTable(DataEngineModel):
    qualified_name: str
    display_name: str | None = None
    description: str | None = None
    columns: list[RelationalColumn] = Field(default_factory=list)


class DataFile(DataEngineModel):
    qualified_name: str
    display_name: str | None = None
    description: str | None = None
    file_type: str | None = None
    path_name: str | None = None
    columns: list[TabularColumn] = Field(default_factory=list)


class SchemaType(DataEngineModel):
    """Schema carried by a port, listing the attributes flowing through it."""

    qualified_name: str
    display_name: str | None = None
    attribute_list: list[Attribute] = Field(default_factory=list)


PortType = str  # INPUT_PORT or OUTPUT_PORT


class PortImplementation(DataEngineModel):
    qualified_name: str
    display_name: str | None = None
    port_type: PortType = "INPUT_PORT"
    schema_type: SchemaType | None = None


class PortAlias(DataEngineModel):
    """Port of a parent process delegating to a port of one of its stages."""

    qualified_name: str
    display_name: str | None = None
    port_type: PortType = "INPUT_PORT"
    delegates_to: str | None = None


class LineageMapping(DataEngineModel):
    """Data flows from the source attribute to the target attribute."""

    source_attribute: str
    target_attribute: str


class Process(DataEngineModel):
    qualified_name: str
    name: str | None = None
    display_name: str | None = None
    description: str | None = None
    owner: str | None = None
    port_implementations: list[PortImplementation] = Field(default_factory=list)
    port_aliases: list[PortAlias] = Field(default_factory=list)
    lineage_mappings: list[LineageMapping] = Field(default_factory=list)
