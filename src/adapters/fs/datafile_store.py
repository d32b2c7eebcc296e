import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class DataFileStore:
    """Generated implementors data files below a root directory."""

    def __init__(self, base_path: str | Path, pattern: str = "**/trait.*.js", encoding: str = "utf-8"):
        self.base_path = Path(base_path).resolve()
        self.pattern = pattern
        self.encoding = encoding

    def _safe_path(self, path: str) -> Path:
        # Prevent traversal
        target = (self.base_path / path).resolve()
        if not target.is_relative_to(self.base_path):
            raise ValueError(f"Path traversal attempt detected: {path}")
        return target

    def list_datafiles(self) -> list[str]:
        """Relative paths of matching files, sorted."""
        if not self.base_path.is_dir():
            raise FileNotFoundError(f"Data file root not found: {self.base_path}")
        found = sorted(
            p.relative_to(self.base_path).as_posix()
            for p in self.base_path.glob(self.pattern)
            if p.is_file()
        )
        logger.debug("Found %d data file(s) under %s", len(found), self.base_path)
        return found

    def read(self, relpath: str) -> str:
        """Read a data file as text. Raises FileNotFoundError."""
        target = self._safe_path(relpath)
        if not target.is_file():
            raise FileNotFoundError(f"File not found: {relpath}")
        return target.read_text(encoding=self.encoding)

    def write(self, relpath: str, text: str) -> str:
        """Write a data file and return its path relative to the root."""
        target = self._safe_path(relpath)
        # Ensure parent exists
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding=self.encoding)
        return target.relative_to(self.base_path).as_posix()
