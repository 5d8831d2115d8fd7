from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List

from artflow_client.core.domain.model.state import StorefrontState
from artflow_client.core.ports.outbound.state import Listener, StateStore, Transition


@dataclass
class InMemoryStateStore(StateStore):
    _state: StorefrontState = field(default_factory=StorefrontState)
    _listeners: List[Listener] = field(default_factory=list)

    def current(self) -> StorefrontState:
        return self._state

    def update(self, transition: Transition) -> StorefrontState:
        before = self._state
        after = transition(before)
        if after is before:
            return before
        self._state = after
        for listener in tuple(self._listeners):
            listener(after)
        return after

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
