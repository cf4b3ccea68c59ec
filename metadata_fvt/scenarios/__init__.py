"""Verification scenarios run per connection."""

from metadata_fvt.scenarios.data_engine import DATA_ENGINE_SCENARIOS
from metadata_fvt.scenarios.subject_area import SubjectAreaDefinitionCategoryFVT

__all__ = [
    "DATA_ENGINE_SCENARIOS",
    "SubjectAreaDefinitionCategoryFVT",
]
