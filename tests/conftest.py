"""Shared fixtures and fakes for the topic chat tests."""
from pathlib import Path
import sys

import pytest

APP_ROOT = Path(__file__).resolve().parents[1] / "app"
if str(APP_ROOT) not in sys.path:
    sys.path.insert(0, str(APP_ROOT))

from topicchat.controller import ChatSessionController
from topicchat.persistence import InMemorySessionStore


class FakeCompletionClient:
    """Records requests and answers with canned replies or raises."""

    def __init__(self, reply="Hello!", error=None):
        self.reply = reply
        self.error = error
        self.requests = []
        self.on_call = None

    def complete(self, request, settings):
        self.requests.append(request)
        if self.on_call is not None:
            self.on_call()
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def llm():
    return FakeCompletionClient()


@pytest.fixture
def store():
    return InMemorySessionStore()


@pytest.fixture
def controller(llm, store):
    return ChatSessionController(llm, store)
