"""Generic entity, relationship and lineage assertions.

Every check queries the repository and fails fast on the first violated
expectation. Nothing is retried and no state is kept between checks.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

from metadata_fvt.core.logging import get_logger
from metadata_fvt.domain.instances import EntityDetail, Relationship, as_string
from metadata_fvt.harness.failures import (
    CardinalityFailure,
    EntityNotFoundFailure,
    LineageMismatchFailure,
    PropertyMismatchFailure,
)
from metadata_fvt.typedefs import QUALIFIED_NAME, TYPE_NAMES


logger = get_logger("harness")


class RepositoryQueries(Protocol):
    """The repository lookups the harness needs."""

    def find_entity_by_property_value(self, type_guid: str | None, value: str) -> list[EntityDetail]: ...

    def find_entity_guid_by_qualified_name(self, qualified_name: str) -> str: ...

    def find_relationships_by_guid(self, entity_guid: str) -> list[Relationship]: ...

    def get_related_entities(self, entity_guid: str, type_guid: str) -> list[EntityDetail]: ...

    def get_lineage_mappings_proxies_qualified_names(
        self, relationships: Sequence[Relationship], qualified_name: str
    ) -> list[str]: ...


def _type_label(type_guid: str) -> str:
    return TYPE_NAMES.get(type_guid, type_guid)


def expect_single(entities: Sequence[EntityDetail] | None, description: str) -> EntityDetail:
    """The only entity in ``entities``; fails on zero or several."""
    if not entities:
        raise EntityNotFoundFailure(f"No {description} found")
    if len(entities) != 1:
        raise CardinalityFailure(
            f"Expected exactly one {description}, found {len(entities)}",
            guids=[entity.guid for entity in entities],
        )
    return entities[0]


def find_single_entity(repository: RepositoryQueries, type_guid: str, qualified_name: str) -> EntityDetail:
    """Look up the one entity of ``type_guid`` carrying ``qualified_name``."""
    entities = repository.find_entity_by_property_value(type_guid, qualified_name)
    entity = expect_single(entities, f"{_type_label(type_guid)} with value {qualified_name!r}")
    logger.debug(f"Resolved {qualified_name} to {entity.guid}")
    return entity


def assert_entity_properties(entity: EntityDetail, expected: Mapping[str, Any]) -> None:
    """Compare each expected property with the persisted one, in order."""
    for name, expected_value in expected.items():
        actual = entity.property_as_string(name)
        wanted = as_string(expected_value)
        if actual != wanted:
            raise PropertyMismatchFailure(
                f"{entity.type_name or 'Entity'} {entity.guid}: property {name!r} "
                f"expected {wanted!r}, found {actual!r}",
                guid=entity.guid,
                property=name,
                expected=wanted,
                actual=actual,
            )


def get_single_related_entity(repository: RepositoryQueries, entity_guid: str, type_guid: str) -> EntityDetail:
    """The one entity of ``type_guid`` related to ``entity_guid``."""
    related = repository.get_related_entities(entity_guid, type_guid)
    return expect_single(related, f"{_type_label(type_guid)} related to {entity_guid}")


def assert_derived_name(entity: EntityDetail, expected_qualified_name: str) -> None:
    """A derived container must be named after its parent."""
    assert_entity_properties(entity, {QUALIFIED_NAME: expected_qualified_name})


def expected_lineage_neighbours(attributes: Sequence[str], index: int) -> list[str]:
    """Sorted predecessor (if any) and successor of ``attributes[index]``."""
    expected = [attributes[index + 1]]
    if index > 0:
        expected.append(attributes[index - 1])
    return sorted(expected)


def assert_lineage_chain(repository: RepositoryQueries, attributes: Sequence[str]) -> None:
    """Check every node but the last is mapped to exactly its chain neighbours.

    Lineage mappings are stored without direction, so each node's mapped
    attributes are compared as a sorted list against its predecessor and
    successor.
    """
    for index in range(len(attributes) - 1):
        current = attributes[index]
        entity_guid = repository.find_entity_guid_by_qualified_name(current)
        relationships = repository.find_relationships_by_guid(entity_guid)
        actual = sorted(repository.get_lineage_mappings_proxies_qualified_names(relationships, current))
        expected = expected_lineage_neighbours(attributes, index)
        if actual != expected:
            raise LineageMismatchFailure(
                f"Lineage of {current} expected {expected}, found {actual}",
                attribute=current,
                position=index,
                expected=expected,
                actual=actual,
            )
