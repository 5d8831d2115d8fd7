from __future__ import annotations

from typing import Callable, Protocol

from artflow_client.core.domain.model.state import StorefrontState

Transition = Callable[[StorefrontState], StorefrontState]
Listener = Callable[[StorefrontState], None]


class StateStore(Protocol):
    def current(self) -> StorefrontState: ...

    def update(self, transition: Transition) -> StorefrontState:
        """Apply ``transition`` to the snapshot held at call time and swap it in."""
        ...

    def subscribe(self, listener: Listener) -> Callable[[], None]: ...
