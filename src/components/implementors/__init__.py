"""
Implementors component - Trait implementors index registry.
"""

from ._impl import ImplementorRegistry
from .component import run_install_hook, run_register
from .models import (
    Buffering,
    ImplementorDescriptor,
    ImplementorHook,
    ImplementorMap,
    InstallHookInput,
    InstallHookOutput,
    Live,
    RegisterInput,
    RegisterOutput,
    RegistryState,
    TraitName,
)
from .ports import ImplementorHookPort, RegistryPort

__all__ = [
    # Entry points
    "run_register",
    "run_install_hook",
    # Registry
    "ImplementorRegistry",
    # Types
    "TraitName",
    "ImplementorDescriptor",
    "ImplementorMap",
    "ImplementorHook",
    # States
    "Buffering",
    "Live",
    "RegistryState",
    # Input models
    "RegisterInput",
    "InstallHookInput",
    # Output models
    "RegisterOutput",
    "InstallHookOutput",
    # Ports
    "ImplementorHookPort",
    "RegistryPort",
]
