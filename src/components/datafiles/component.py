"""
DataFiles component - Generated implementors data files.

Shell Layer - converts parse results to output models.
"""

from __future__ import annotations

from ._impl import parse_datafile, trait_path_from_relpath
from .models import ParseDataFileInput, ParseDataFileOutput


def run_parse(input_data: ParseDataFileInput) -> ParseDataFileOutput:
    """Parse a data file located at input_data.relpath."""
    trait_path, errors = trait_path_from_relpath(input_data.relpath)
    if trait_path is None:
        return ParseDataFileOutput(
            datafile=None,
            errors=tuple(errors),
            success=False,
        )

    datafile, errors = parse_datafile(input_data.text, trait_path)

    return ParseDataFileOutput(
        datafile=datafile,
        errors=tuple(errors),
        success=datafile is not None,
    )
