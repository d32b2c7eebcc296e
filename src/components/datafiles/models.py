"""
DataFiles component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.components.implementors import ImplementorDescriptor, TraitName

# --- Validation Errors ---


@dataclass(frozen=True)
class DataFileValidationError:
    """Data file validation error."""

    code: str
    message: str
    field: str | None = None


# --- Parsed File ---


@dataclass(frozen=True)
class DataFile:
    """
    One generated implementors data file.

    Implementors are grouped by the crate that declares them; crate order
    and descriptor order are generation order.
    """

    trait_path: TraitName
    crates: dict[str, list[ImplementorDescriptor]] = field(default_factory=dict)

    @property
    def trait_name(self) -> str:
        """Last path segment, e.g. ``Mul`` for ``core::ops::Mul``."""
        return self.trait_path.rsplit("::", 1)[-1]

    @property
    def implementor_count(self) -> int:
        return sum(len(descriptors) for descriptors in self.crates.values())


# --- Input Models ---


@dataclass(frozen=True)
class ParseDataFileInput:
    """Input for parsing a data file."""

    text: str
    relpath: str


# --- Output Models ---


@dataclass(frozen=True)
class ParseDataFileOutput:
    """Output from parse operation."""

    datafile: DataFile | None
    errors: tuple[DataFileValidationError, ...]
    success: bool
