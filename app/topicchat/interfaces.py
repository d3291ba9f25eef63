"""
Abstractions for pluggable services. Inversion of control: the controller
depends on these protocols, not on concrete services, so it can be driven by
fakes in tests and the backend can be swapped later.

Common protocols:
- CompletionClient.complete(request, settings) -> str
- RequestBuilder.build(...) -> CompletionRequest
- SessionStore.load() -> SessionState & save(state)

Testing: Use simple fake implementations to test the controller without
network calls or disk access.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Optional, Protocol, Sequence

from .models import CompletionRequest, LLMSettings, Message, StagedImage

if TYPE_CHECKING:
    from .state import SessionState


class CompletionError(RuntimeError):
    """The backend answered, but not with usable text."""


class CompletionClient(Protocol):
    def complete(self, request: CompletionRequest, settings: LLMSettings) -> str: ...


class RequestBuilder(Protocol):
    def build(
        self,
        *,
        draft: str,
        image: Optional[StagedImage],
        history: Sequence[Message],
        tone: str,
    ) -> CompletionRequest: ...


class SessionStore(Protocol):
    def load(self) -> "SessionState": ...

    def save(self, state: "SessionState") -> None: ...
