"""Setup invokers: build scenario metadata and submit it through a client."""

from metadata_fvt.setup.data_stores import DataStoreAndRelationalTableSetupService
from metadata_fvt.setup.processes import ProcessSetupService

__all__ = [
    "DataStoreAndRelationalTableSetupService",
    "ProcessSetupService",
]
