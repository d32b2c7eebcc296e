"""
Implementors component - Data models.

Types for the trait implementors index and the registry's two states.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field

# --- Index Types ---

TraitName = str
ImplementorDescriptor = str
ImplementorMap = Mapping[TraitName, Sequence[ImplementorDescriptor]]
ImplementorHook = Callable[[ImplementorMap], None]


# --- Registry States ---


@dataclass(frozen=True)
class Buffering:
    """No hook installed yet; registrations are queued."""

    queue: list[ImplementorMap] = field(default_factory=list)


@dataclass(frozen=True)
class Live:
    """Hook installed; registrations are forwarded immediately."""

    hook: ImplementorHook


RegistryState = Buffering | Live


# --- Input Models ---


@dataclass(frozen=True)
class RegisterInput:
    """Input for registering one implementor map."""

    implementors: ImplementorMap


@dataclass(frozen=True)
class InstallHookInput:
    """Input for installing the consumer hook."""

    hook: ImplementorHook


# --- Output Models ---


@dataclass(frozen=True)
class RegisterOutput:
    """Output from a register call."""

    delivered: bool
    pending: int


@dataclass(frozen=True)
class InstallHookOutput:
    """Output from a hook installation."""

    drained: int
    replaced: bool
