"""
Purpose: The single orchestration point for a chat session. Owns the session
state (topics, transcripts, tone, draft) for the process lifetime.
Prevents the UI from knowing how prompts, the backend or persistence work.

Key responsibilities:
- Topic lifecycle: add, delete, switch, clear.
- Tone selection.
- Draft and staged image handling.
- One send at a time: build the request, call the CompletionClient, append
  the exchange (or an error reply) to the topic it was sent from.
- Persist after every mutation; a failed save is logged, never raised.

Testing: Pure unit tests with fakes: fake CompletionClient and an
InMemorySessionStore. Verify transcript contents and the sending guard.
"""

from __future__ import annotations
import logging
from typing import Optional

from .interfaces import CompletionClient, RequestBuilder, SessionStore
from .models import ERROR_REPLY, LLMSettings, Message, StagedImage
from .prompts import DefaultRequestBuilder
from .state import SessionState
from .tone import ToneSelector

logger = logging.getLogger(__name__)


class ChatSessionController:
    def __init__(
        self,
        llm: CompletionClient,
        store: SessionStore,
        *,
        settings: Optional[LLMSettings] = None,
        prompts: Optional[RequestBuilder] = None,
    ):
        self.llm: CompletionClient = llm
        self.store: SessionStore = store
        self.settings: LLMSettings = settings or LLMSettings(model="gpt-4o-mini")
        self.prompts: RequestBuilder = prompts or DefaultRequestBuilder()
        self.state: SessionState = store.load()
        self._sending: bool = False

    # -- read-only views --

    @property
    def topics(self) -> tuple[str, ...]:
        return self.state.registry.topics

    @property
    def active_topic(self) -> str:
        return self.state.registry.active

    @property
    def transcript(self) -> tuple[Message, ...]:
        """Messages of the active topic."""
        return self.state.transcripts.get(self.active_topic)

    def get_transcript(self, topic: str) -> tuple[Message, ...]:
        return self.state.transcripts.get(topic)

    @property
    def tone(self) -> ToneSelector:
        return self.state.tone

    @property
    def draft(self) -> str:
        return self.state.draft

    @property
    def staged_image(self) -> Optional[StagedImage]:
        return self.state.staged_image

    @property
    def is_sending(self) -> bool:
        return self._sending

    # -- draft --

    def set_draft(self, text: str) -> None:
        self.state.draft = text or ""

    def stage_image(self, image: Optional[StagedImage]) -> None:
        """Stage an image for the next send, replacing any previous one."""
        if image is not None:
            self.state.staged_image = image

    def discard_image(self) -> None:
        self.state.staged_image = None

    # -- topics & tone --

    def add_topic(self, name: str) -> bool:
        changed = self.state.registry.add(name)
        if changed:
            logger.info(f"Controller: added topic {self.active_topic!r}")
            self._persist()
        return changed

    def delete_topic(self, name: str) -> bool:
        changed = self.state.registry.delete(name)
        if changed:
            logger.info(f"Controller: deleted topic {name!r}")
            self._persist()
        return changed

    def set_active(self, name: str) -> bool:
        if name not in self.state.registry:
            logger.debug(f"Controller: ignoring switch to unknown topic {name!r}")
            return False
        self.state.registry.set_active(name)
        self._persist()
        return True

    def clear_topic(self, name: Optional[str] = None) -> None:
        """Empty a topic's transcript (the active one by default)."""
        self.state.transcripts.clear(name or self.active_topic)
        self._persist()

    def select_tone(self, label: str) -> bool:
        changed = self.state.tone.select(label)
        if changed:
            self._persist()
        return changed

    # -- sending --

    def submit(self) -> bool:
        """Send the draft (and staged image) from the active topic.

        Returns False when nothing was sent: another send is in flight, or
        there is neither text nor an image. Backend failures are recorded in
        the transcript as an error reply and never raised.
        """
        if self._sending:
            logger.debug("Controller: submit ignored, a send is already in flight")
            return False

        draft = self.state.draft
        image = self.state.staged_image
        if not draft.strip() and image is None:
            return False

        self._sending = True
        topic = self.active_topic
        user_message = Message(
            role="user",
            content=draft.strip(),
            image=image.preview if image is not None else None,
        )
        try:
            try:
                request = self.prompts.build(
                    draft=draft,
                    image=image,
                    history=self.state.transcripts.get(topic),
                    tone=self.state.tone.current,
                )
                reply = self.llm.complete(request, self.settings)
            except Exception:
                logger.exception(f"Controller: send failed for topic {topic!r}")
                self._record_exchange(topic, user_message, ERROR_REPLY)
                return True

            if self._record_exchange(topic, user_message, reply):
                self.state.draft = ""
                self.state.staged_image = None
            return True
        finally:
            self._sending = False

    def _record_exchange(self, topic: str, user_message: Message, reply: str) -> bool:
        if topic not in self.state.registry:
            logger.warning(f"Controller: topic {topic!r} was deleted mid-send, dropping reply")
            return False
        self.state.transcripts.append(topic, user_message)
        self.state.transcripts.append(topic, Message(role="assistant", content=reply))
        self._persist()
        return True

    # -- persistence --

    def _persist(self) -> None:
        try:
            self.store.save(self.state)
        except Exception:
            logger.exception("Controller: failed to persist session state")

