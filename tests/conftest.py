from __future__ import annotations

import pytest

from support import FakeGateway, RecordingNotifier, ScriptedInput

from artflow_client.adapters.outbound.in_memory_state import InMemoryStateStore


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def state() -> InMemoryStateStore:
    return InMemoryStateStore()


@pytest.fixture
def scripted_input() -> ScriptedInput:
    return ScriptedInput()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()
