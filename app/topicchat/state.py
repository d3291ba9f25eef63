"""
Session State: the aggregate the controller owns and the store mirrors.

Persisted records:
- topics: ordered list of topic names
- chat_histories: topic -> ordered list of message dicts
- tone: {"current": str, "available": [str, ...]}
- active_topic: str

Draft text and the staged image live only in memory.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from .models import Message, StagedImage
from .tone import ToneSelector
from .topics import TopicRegistry
from .transcripts import TranscriptStore


@dataclass
class SessionState:
    transcripts: TranscriptStore
    registry: TopicRegistry
    tone: ToneSelector = field(default_factory=ToneSelector)
    draft: str = ""
    staged_image: Optional[StagedImage] = None

    @classmethod
    def default(cls) -> "SessionState":
        transcripts = TranscriptStore()
        return cls(transcripts=transcripts, registry=TopicRegistry(transcripts))

    def to_records(self) -> dict[str, Any]:
        return {
            "topics": list(self.registry.topics),
            "chat_histories": self.transcripts.to_dict(),
            "tone": self.tone.to_dict(),
            "active_topic": self.registry.active,
        }

    @classmethod
    def from_records(cls, records: Mapping[str, Any]) -> "SessionState":
        """Rebuild state from persisted records.

        Raises ValueError when the topic list or histories are malformed.
        Missing tone/active records fall back to their defaults.
        """
        topics = records.get("topics")
        histories = records.get("chat_histories")
        if topics is None and histories is None:
            return cls.default()
        topics = topics or []
        histories = histories or {}
        if not isinstance(topics, list) or not all(isinstance(t, str) for t in topics):
            raise ValueError("Persisted topics must be a list of strings.")
        if not isinstance(histories, Mapping):
            raise ValueError("Persisted chat histories must be a mapping.")

        parsed: dict[str, list[Message]] = {}
        for topic, messages in histories.items():
            if not isinstance(messages, list):
                raise ValueError(f"History for {topic!r} must be a list.")
            parsed[topic] = [Message.from_dict(m) for m in messages]

        transcripts = TranscriptStore(parsed)
        active = records.get("active_topic")
        registry = TopicRegistry(
            transcripts,
            topics=topics,
            active=active if isinstance(active, str) else None,
        )

        tone_record = records.get("tone")
        try:
            tone = ToneSelector.from_dict(tone_record) if tone_record else ToneSelector()
        except (ValueError, TypeError, AttributeError):
            tone = ToneSelector()

        return cls(transcripts=transcripts, registry=registry, tone=tone)
