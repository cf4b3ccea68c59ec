"""Assertion harness: compare submitted metadata with the repository contents."""

from metadata_fvt.harness.assertions import (
    RepositoryQueries,
    assert_derived_name,
    assert_entity_properties,
    assert_lineage_chain,
    expect_single,
    expected_lineage_neighbours,
    find_single_entity,
    get_single_related_entity,
)
from metadata_fvt.harness.failures import (
    CardinalityFailure,
    EntityNotFoundFailure,
    LineageMismatchFailure,
    PropertyMismatchFailure,
    VerificationFailure,
)
from metadata_fvt.harness.verifiers import (
    verify_data_file,
    verify_database,
    verify_lineage_mappings,
    verify_relational_table,
    verify_software_server_capability,
)

__all__ = [
    "CardinalityFailure",
    "EntityNotFoundFailure",
    "LineageMismatchFailure",
    "PropertyMismatchFailure",
    "RepositoryQueries",
    "VerificationFailure",
    "assert_derived_name",
    "assert_entity_properties",
    "assert_lineage_chain",
    "expect_single",
    "expected_lineage_neighbours",
    "find_single_entity",
    "get_single_related_entity",
    "verify_data_file",
    "verify_database",
    "verify_lineage_mappings",
    "verify_relational_table",
    "verify_software_server_capability",
]
