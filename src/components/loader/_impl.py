"""
IndexLoader - Feeds generated data files into the implementors registry.

Each data file becomes exactly one implementor map and one register() call,
in the order the source lists the files.

Key behaviors:
- Registry is passed in by reference, never created here
- Unreadable or unparseable files are skipped and reported, or raise in
  strict mode
- Nothing is registered for a file that fails to parse
"""

from __future__ import annotations

import logging

from src.components.datafiles import (
    DataFileSourcePort,
    DataFileValidationError,
    ParseDataFileInput,
    run_parse,
    to_implementor_map,
)
from src.components.implementors import RegistryPort

from .models import DataFileLoadError, LoadFailure, LoadReport

logger = logging.getLogger(__name__)


class IndexLoader:
    """
    Index loader.

    Reads data files from a source and registers their maps.
    """

    def __init__(self, source: DataFileSourcePort, registry: RegistryPort) -> None:
        """Initialize loader."""
        self._source = source
        self._registry = registry

    def load_file(self, relpath: str) -> LoadFailure | None:
        """
        Parse and register one data file.

        Returns:
            LoadFailure if the file could not be parsed, else None.
        """
        try:
            text = self._source.read(relpath)
        except ValueError as e:
            # Undecodable bytes (UnicodeDecodeError) or a path escaping the root
            logger.warning("Skipping %s: %s", relpath, e)
            return LoadFailure(
                relpath=relpath,
                errors=(
                    DataFileValidationError(
                        code="read_error",
                        message=f"Could not read data file: {e}",
                    ),
                ),
            )

        result = run_parse(ParseDataFileInput(text=text, relpath=relpath))
        if result.datafile is None:
            logger.warning(
                "Skipping %s: %s",
                relpath,
                "; ".join(e.message for e in result.errors),
            )
            return LoadFailure(relpath=relpath, errors=result.errors)

        self._registry.register(to_implementor_map(result.datafile))
        logger.debug(
            "Registered %s (%d implementors)",
            result.datafile.trait_path,
            result.datafile.implementor_count,
        )
        return None

    def load_all(self, strict: bool = False) -> LoadReport:
        """
        Load every data file the source lists.

        Raises:
            DataFileLoadError: in strict mode, on the first unparseable file.
        """
        registered: list[str] = []
        failures: list[LoadFailure] = []

        for relpath in self._source.list_datafiles():
            failure = self.load_file(relpath)
            if failure is None:
                registered.append(relpath)
                continue
            if strict:
                raise DataFileLoadError(failure.relpath, failure.errors)
            failures.append(failure)

        logger.info(
            "Loaded %d data file(s), %d failed", len(registered), len(failures)
        )
        return LoadReport(registered=tuple(registered), failures=tuple(failures))
