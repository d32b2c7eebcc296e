"""
Loader component - Data file ingestion into the implementors registry.

Shell Layer - runs a load pass with the requested strictness.
"""

from __future__ import annotations

from ._impl import IndexLoader
from .models import LoadInput, LoadReport


def run_load(input_data: LoadInput, loader: IndexLoader) -> LoadReport:
    """Load all data files; raises DataFileLoadError in strict mode."""
    return loader.load_all(strict=input_data.strict)
