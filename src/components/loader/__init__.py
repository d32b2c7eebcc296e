"""
Loader component - Data file ingestion into the implementors registry.
"""

from ._impl import IndexLoader
from .component import run_load
from .models import DataFileLoadError, LoadFailure, LoadInput, LoadReport

__all__ = [
    # Entry points
    "run_load",
    # Service
    "IndexLoader",
    # Models
    "LoadInput",
    "LoadReport",
    "LoadFailure",
    "DataFileLoadError",
]
