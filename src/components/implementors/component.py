"""
Implementors component - Trait implementors index registry.

Shell Layer - entry points reporting what the registry did with each call.
"""

from __future__ import annotations

from ._impl import ImplementorRegistry
from .models import (
    InstallHookInput,
    InstallHookOutput,
    RegisterInput,
    RegisterOutput,
)


def run_register(
    input_data: RegisterInput,
    registry: ImplementorRegistry,
) -> RegisterOutput:
    """Register an implementor map, delivering it or queueing it."""
    delivered = registry.is_live
    registry.register(input_data.implementors)

    return RegisterOutput(
        delivered=delivered,
        pending=len(registry.pending()),
    )


def run_install_hook(
    input_data: InstallHookInput,
    registry: ImplementorRegistry,
) -> InstallHookOutput:
    """Install the consumer hook and drain pending maps."""
    replaced = registry.is_live
    drained = registry.install_hook(input_data.hook)

    return InstallHookOutput(
        drained=drained,
        replaced=replaced,
    )
