"""
DataFiles component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol


class DataFileSourcePort(Protocol):
    """Source of generated data files, addressed by relative path."""

    def list_datafiles(self) -> list[str]:
        """List relative paths of all data files."""
        ...

    def read(self, relpath: str) -> str:
        """Read one data file as text."""
        ...
