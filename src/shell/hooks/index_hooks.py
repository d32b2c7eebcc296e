"""
Index hooks - Consumer-side hooks for the implementors registry.

The documentation renderer installs a hook on the registry to receive
implementor maps. These hooks build the in-memory trait index that pages
are rendered from, and log deliveries.

Key behaviors:
- TraitIndexHook appends descriptors per trait, preserving delivery order
- LoggingHook logs each delivery, then forwards the map unchanged
- Descriptors are never inspected or rewritten
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from src.components.implementors import (
    ImplementorDescriptor,
    ImplementorHook,
    ImplementorMap,
    TraitName,
)

logger = logging.getLogger(__name__)


# --- Hooks Configuration ---


@dataclass
class HooksConfig:
    """Configuration for index hooks."""

    log_deliveries: bool = True


# --- Trait Index ---


class TraitIndexHook:
    """
    Accumulates delivered maps into a per-trait implementor index.

    A trait delivered more than once (e.g. from two data files) has its
    descriptors appended in delivery order.
    """

    def __init__(self) -> None:
        """Initialize empty index."""
        self.index: dict[TraitName, list[ImplementorDescriptor]] = {}
        self.deliveries = 0

    def __call__(self, implementors: ImplementorMap) -> None:
        self.deliveries += 1
        for trait, descriptors in implementors.items():
            self.index.setdefault(trait, []).extend(descriptors)

    def implementors_of(self, trait: TraitName) -> list[ImplementorDescriptor]:
        """Descriptors for a trait, empty if unknown."""
        return list(self.index.get(trait, []))

    def summary(self) -> dict[TraitName, int]:
        """Implementor count per trait, sorted by trait name."""
        return {trait: len(self.index[trait]) for trait in sorted(self.index)}


# --- Logging Wrapper ---


class LoggingHook:
    """Logs each delivery before forwarding to the wrapped hook."""

    def __init__(
        self,
        inner: ImplementorHook,
        config: HooksConfig | None = None,
    ) -> None:
        """Initialize wrapper."""
        self._inner = inner
        self._config = config or HooksConfig()

    def __call__(self, implementors: ImplementorMap) -> None:
        if self._config.log_deliveries:
            for trait, descriptors in implementors.items():
                logger.debug("Delivering %d implementor(s) of %s", len(descriptors), trait)
        self._inner(implementors)
