"""Per-topic message histories."""

from __future__ import annotations
from typing import Iterable, Iterator, Optional

from .models import Message


class TranscriptStore:
    """Ordered, append-only message lists keyed by topic name.

    Transcripts are created and dropped by the topic registry; everything
    else only appends, clears or reads.
    """

    def __init__(self, histories: Optional[dict[str, Iterable[Message]]] = None):
        self._histories: dict[str, list[Message]] = {}
        for topic, messages in (histories or {}).items():
            self._histories[topic] = list(messages)

    def __contains__(self, topic: object) -> bool:
        return topic in self._histories

    def __iter__(self) -> Iterator[str]:
        return iter(self._histories)

    def __len__(self) -> int:
        return len(self._histories)

    def create(self, topic: str) -> None:
        self._histories.setdefault(topic, [])

    def drop(self, topic: str) -> None:
        self._histories.pop(topic, None)

    def append(self, topic: str, message: Message) -> None:
        if topic not in self._histories:
            raise KeyError(f"Unknown topic: {topic!r}")
        self._histories[topic].append(message)

    def clear(self, topic: str) -> None:
        """Empty a transcript in place; the topic keeps existing."""
        if topic in self._histories:
            self._histories[topic].clear()

    def get(self, topic: str) -> tuple[Message, ...]:
        """Read-only view; unknown topics read as empty."""
        return tuple(self._histories.get(topic, ()))

    def to_dict(self) -> dict[str, list[dict]]:
        return {
            topic: [m.to_dict() for m in messages]
            for topic, messages in self._histories.items()
        }
