"""
DataFiles component - Generated implementors data-file format.
"""

from ._impl import (
    emit_datafile,
    parse_datafile,
    relpath_for_trait,
    to_implementor_map,
    trait_path_from_relpath,
)
from .component import run_parse
from .models import (
    DataFile,
    DataFileValidationError,
    ParseDataFileInput,
    ParseDataFileOutput,
)
from .ports import DataFileSourcePort

__all__ = [
    # Entry points
    "run_parse",
    # Functional core
    "parse_datafile",
    "emit_datafile",
    "trait_path_from_relpath",
    "relpath_for_trait",
    "to_implementor_map",
    # Models
    "DataFile",
    "DataFileValidationError",
    "ParseDataFileInput",
    "ParseDataFileOutput",
    # Ports
    "DataFileSourcePort",
]
