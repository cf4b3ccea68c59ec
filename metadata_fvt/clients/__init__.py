"""REST clients for the Data Engine, Subject Area and repository services."""

from metadata_fvt.clients.base import PlatformClient
from metadata_fvt.clients.data_engine import DataEngineClient
from metadata_fvt.clients.repository import RepositoryService, exact_match_regex
from metadata_fvt.clients.subject_area import SubjectAreaClient

__all__ = [
    "DataEngineClient",
    "PlatformClient",
    "RepositoryService",
    "SubjectAreaClient",
    "exact_match_regex",
]
