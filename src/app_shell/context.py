from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from src.adapters.fs.datafile_store import DataFileStore
from src.components.implementors import ImplementorRegistry
from src.components.loader import IndexLoader
from src.rules.models import Rules
from src.shell.hooks.index_hooks import HooksConfig, LoggingHook, TraitIndexHook


@dataclass
class IndexContext:
    store: DataFileStore
    registry: ImplementorRegistry
    loader: IndexLoader
    index: TraitIndexHook
    rules: Rules

    @classmethod
    def create(cls, root: str | Path, rules: Rules) -> IndexContext:
        # Adapters
        store = DataFileStore(
            root,
            pattern=rules.datafiles.glob,
            encoding=rules.datafiles.encoding,
        )

        # One registry per context, shared by the loader and the index hook
        registry = ImplementorRegistry()
        loader = IndexLoader(store, registry)
        index = TraitIndexHook()

        return cls(
            store=store,
            registry=registry,
            loader=loader,
            index=index,
            rules=rules,
        )

    def install_index(self) -> int:
        """Install the trait index as the registry hook; returns maps drained."""
        hook = LoggingHook(
            self.index,
            HooksConfig(log_deliveries=self.rules.registry.log_deliveries),
        )
        return self.registry.install_hook(hook)
