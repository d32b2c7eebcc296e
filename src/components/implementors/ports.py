"""
Implementors component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol

from .models import ImplementorHook, ImplementorMap


class ImplementorHookPort(Protocol):
    """Consumer that receives implementor maps as they become available."""

    def __call__(self, implementors: ImplementorMap) -> None:
        """Consume one implementor map."""
        ...


class RegistryPort(Protocol):
    """Registration interface used by data-file producers."""

    def register(self, implementors: ImplementorMap) -> None:
        """Deliver or queue one implementor map."""
        ...

    def install_hook(self, hook: ImplementorHook) -> int:
        """Install the consumer hook; returns the number of maps drained."""
        ...
