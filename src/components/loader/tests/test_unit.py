"""
Loader component unit tests.

Tests for feeding data files into the registry.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from src.adapters.fs.datafile_store import DataFileStore
from src.components.datafiles import DataFile, emit_datafile
from src.components.implementors import ImplementorMap, ImplementorRegistry
from src.components.loader import (
    DataFileLoadError,
    IndexLoader,
    LoadInput,
    run_load,
)

# --- Mock Source ---


class MockDataFileSource:
    """In-memory data file source for testing."""

    def __init__(self) -> None:
        self._files: dict[str, str] = {}

    def add(self, relpath: str, text: str) -> None:
        self._files[relpath] = text

    def list_datafiles(self) -> list[str]:
        return sorted(self._files)

    def read(self, relpath: str) -> str:
        if relpath not in self._files:
            raise FileNotFoundError(relpath)
        return self._files[relpath]


@pytest.fixture
def source() -> MockDataFileSource:
    fake = MockDataFileSource()
    fake.add(
        "core/ops/trait.Mul.js",
        emit_datafile(
            DataFile(trait_path="core::ops::Mul", crates={"bigint": ["U256 impl"]})
        ),
    )
    fake.add(
        "core/ops/trait.Shr.js",
        emit_datafile(DataFile(trait_path="core::ops::Shr", crates={"libc": []})),
    )
    return fake


@pytest.fixture
def registry() -> ImplementorRegistry:
    return ImplementorRegistry()


@pytest.fixture
def loader(source: MockDataFileSource, registry: ImplementorRegistry) -> IndexLoader:
    return IndexLoader(source=source, registry=registry)


# --- Load Tests ---


class TestLoadAll:
    """Loading every listed file."""

    def test_buffers_before_hook(
        self, loader: IndexLoader, registry: ImplementorRegistry
    ) -> None:
        """Without a hook every map ends up pending, in source order."""
        report = run_load(LoadInput(), loader)

        assert report.success is True
        assert report.registered == ("core/ops/trait.Mul.js", "core/ops/trait.Shr.js")
        assert registry.pending() == (
            {"core::ops::Mul": ["U256 impl"]},
            {"core::ops::Shr": []},
        )

    def test_delivers_when_live(
        self, loader: IndexLoader, registry: ImplementorRegistry
    ) -> None:
        """With a hook installed maps are delivered immediately."""
        seen: list[ImplementorMap] = []
        registry.install_hook(seen.append)

        loader.load_all()

        assert seen == [{"core::ops::Mul": ["U256 impl"]}, {"core::ops::Shr": []}]
        assert registry.pending() == ()

    def test_skips_bad_file(
        self,
        source: MockDataFileSource,
        loader: IndexLoader,
        registry: ImplementorRegistry,
    ) -> None:
        """Unparseable files are reported and not registered."""
        source.add("core/ops/trait.Add.js", "garbage")

        report = loader.load_all()

        assert report.success is False
        assert report.total == 3
        assert report.failures[0].relpath == "core/ops/trait.Add.js"
        assert len(registry.pending()) == 2

    def test_strict_raises(
        self, source: MockDataFileSource, loader: IndexLoader
    ) -> None:
        """Strict mode stops at the first bad file."""
        source.add("core/ops/trait.Add.js", "garbage")

        with pytest.raises(DataFileLoadError) as exc_info:
            run_load(LoadInput(strict=True), loader)

        assert exc_info.value.relpath == "core/ops/trait.Add.js"
        assert "missing_preamble" in str(exc_info.value)

    def test_empty_source(self, registry: ImplementorRegistry) -> None:
        report = IndexLoader(MockDataFileSource(), registry).load_all()

        assert report.total == 0
        assert registry.pending() == ()


class TestLoadFile:
    """Loading a single file."""

    def test_load_file_success(
        self, loader: IndexLoader, registry: ImplementorRegistry
    ) -> None:
        assert loader.load_file("core/ops/trait.Shr.js") is None
        assert registry.pending() == ({"core::ops::Shr": []},)

    def test_load_file_missing(self, loader: IndexLoader) -> None:
        with pytest.raises(FileNotFoundError):
            loader.load_file("core/ops/trait.Nope.js")

    def test_load_file_bad_name(
        self, source: MockDataFileSource, loader: IndexLoader
    ) -> None:
        source.add("core/ops/index.js", "")

        failure = loader.load_file("core/ops/index.js")

        assert failure is not None
        assert failure.errors[0].code == "invalid_filename"


class TestReadErrors:
    """Files that cannot be read are reported like unparseable ones."""

    def test_undecodable_file_is_reported(
        self, tmp_path: Path, registry: ImplementorRegistry
    ) -> None:
        ops = tmp_path / "core" / "ops"
        ops.mkdir(parents=True)
        (ops / "trait.Shr.js").write_text(
            emit_datafile(DataFile(trait_path="core::ops::Shr", crates={"libc": []})),
            encoding="utf-8",
        )
        (ops / "trait.Mul.js").write_bytes(b"\xff\xfe garbage")

        report = IndexLoader(DataFileStore(tmp_path), registry).load_all()

        assert report.registered == ("core/ops/trait.Shr.js",)
        assert len(report.failures) == 1
        assert report.failures[0].relpath == "core/ops/trait.Mul.js"
        assert report.failures[0].errors[0].code == "read_error"
        assert registry.pending() == ({"core::ops::Shr": []},)

    def test_undecodable_file_strict_raises(
        self, tmp_path: Path, registry: ImplementorRegistry
    ) -> None:
        (tmp_path / "trait.Mul.js").write_bytes(b"\xff\xfe garbage")

        with pytest.raises(DataFileLoadError) as exc_info:
            IndexLoader(DataFileStore(tmp_path), registry).load_all(strict=True)

        assert "read_error" in str(exc_info.value)

    def test_rejected_path_is_reported(self, registry: ImplementorRegistry) -> None:
        class EscapingSource(MockDataFileSource):
            def read(self, relpath: str) -> str:
                raise ValueError(f"Path traversal attempt detected: {relpath}")

        fake = EscapingSource()
        fake.add("core/ops/trait.Mul.js", "")

        failure = IndexLoader(fake, registry).load_file("core/ops/trait.Mul.js")

        assert failure is not None
        assert failure.errors[0].code == "read_error"
        assert "traversal" in failure.errors[0].message
