"""
Loader component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.components.datafiles import DataFileValidationError

# --- Errors ---


class DataFileLoadError(Exception):
    """Raised in strict mode when a data file cannot be parsed."""

    def __init__(self, relpath: str, errors: tuple[DataFileValidationError, ...]) -> None:
        self.relpath = relpath
        self.errors = errors
        codes = ", ".join(e.code for e in errors)
        super().__init__(f"Failed to load {relpath}: {codes}")


@dataclass(frozen=True)
class LoadFailure:
    """A data file that was skipped."""

    relpath: str
    errors: tuple[DataFileValidationError, ...]


# --- Input Models ---


@dataclass(frozen=True)
class LoadInput:
    """Input for loading every data file from a source."""

    strict: bool = False


# --- Output Models ---


@dataclass(frozen=True)
class LoadReport:
    """Outcome of a load pass."""

    registered: tuple[str, ...]
    failures: tuple[LoadFailure, ...]

    @property
    def success(self) -> bool:
        return not self.failures

    @property
    def total(self) -> int:
        return len(self.registered) + len(self.failures)
