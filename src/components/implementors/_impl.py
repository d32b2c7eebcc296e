"""
ImplementorRegistry - Deferred delivery of trait implementor maps.

Each generated data file produces one implementor map and registers it.
Maps registered before the documentation renderer installs its hook are
buffered and drained, in arrival order, when the hook is installed.

Key behaviors:
- Buffering: register() appends to the pending queue
- Live: register() invokes the hook synchronously with the same map object
- install_hook() drains the queue exactly once; Live is terminal unless
  the hook raises mid-drain, which returns the undelivered maps to the queue
- Maps are never copied, mutated, reordered or dropped
"""

from __future__ import annotations

import logging

from .models import (
    Buffering,
    ImplementorHook,
    ImplementorMap,
    Live,
    RegistryState,
)

logger = logging.getLogger(__name__)


class ImplementorRegistry:
    """
    Registry of implementor maps awaiting (or forwarded to) a consumer hook.

    Construct one per process (or page load) and pass it by reference to
    every producer and to the consumer that installs the hook.
    """

    def __init__(self) -> None:
        """Initialize registry in the Buffering state."""
        self._state: RegistryState = Buffering()
        self._delivered = 0

    @property
    def state(self) -> RegistryState:
        """Current state variant."""
        return self._state

    @property
    def is_live(self) -> bool:
        return isinstance(self._state, Live)

    @property
    def delivered_count(self) -> int:
        """Number of hook invocations so far."""
        return self._delivered

    def pending(self) -> tuple[ImplementorMap, ...]:
        """Snapshot of maps waiting for a hook."""
        if isinstance(self._state, Buffering):
            return tuple(self._state.queue)
        return ()

    def register(self, implementors: ImplementorMap) -> None:
        """
        Register one implementor map.

        Forwards to the hook when Live, otherwise queues it.
        """
        state = self._state
        if isinstance(state, Live):
            self._deliver(state.hook, implementors)
            return

        state.queue.append(implementors)
        logger.debug(
            "Queued implementor map (%d traits), %d pending",
            len(implementors),
            len(state.queue),
        )

    def install_hook(self, hook: ImplementorHook) -> int:
        """
        Install the consumer hook.

        Drains queued maps in arrival order and switches to Live.
        Installing again replaces the hook; drained maps are not re-delivered.

        Returns:
            Number of maps drained by this call.
        """
        state = self._state
        if isinstance(state, Live):
            logger.warning("Implementor hook already installed; replacing it")
            self._state = Live(hook=hook)
            return 0

        # Flip first so registrations made by the hook during drain go live.
        queue = state.queue
        self._state = Live(hook=hook)

        drained = 0
        try:
            for implementors in queue:
                self._deliver(hook, implementors)
                drained += 1
        except Exception:
            # Undelivered maps, the failing one first, wait for the next install
            self._state = Buffering(queue=queue[drained:])
            raise
        queue.clear()

        logger.info("Implementor hook installed, drained %d pending map(s)", drained)
        return drained

    def _deliver(self, hook: ImplementorHook, implementors: ImplementorMap) -> None:
        hook(implementors)
        self._delivered += 1
