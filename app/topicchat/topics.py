"""Topic registry: the ordered set of topic names and the active pointer."""

from __future__ import annotations
import logging
from typing import Iterable, Iterator, Optional

from .models import DEFAULT_TOPIC
from .services.security import DefaultSecurity
from .transcripts import TranscriptStore

logger = logging.getLogger(__name__)


class TopicRegistry:
    """Owns topic names and keeps the transcript store in step with them.

    The default topic always exists and cannot be deleted. Invalid requests
    (blank or duplicate names, deleting the default topic) are no-ops.
    """

    def __init__(
        self,
        transcripts: TranscriptStore,
        topics: Optional[Iterable[str]] = None,
        active: Optional[str] = None,
    ):
        self._transcripts = transcripts
        self._security = DefaultSecurity()
        self._topics: list[str] = []
        for name in topics or ():
            if name and name not in self._topics:
                self._topics.append(name)
        if DEFAULT_TOPIC not in self._topics:
            self._topics.insert(0, DEFAULT_TOPIC)

        # every topic gets exactly one transcript, and nothing else does
        for name in self._topics:
            transcripts.create(name)
        for orphan in [t for t in transcripts if t not in self._topics]:
            logger.warning(f"TopicRegistry: dropping orphan transcript {orphan!r}")
            transcripts.drop(orphan)

        self._active = active if active in self._topics else DEFAULT_TOPIC

    def __contains__(self, name: object) -> bool:
        return name in self._topics

    def __iter__(self) -> Iterator[str]:
        return iter(self._topics)

    def __len__(self) -> int:
        return len(self._topics)

    @property
    def topics(self) -> tuple[str, ...]:
        return tuple(self._topics)

    @property
    def active(self) -> str:
        return self._active

    def add(self, name: str) -> bool:
        """Append a new topic with an empty transcript and make it active."""
        clean = self._security.normalize_topic_name(name)
        if not clean or clean in self._topics:
            logger.debug(f"TopicRegistry: ignoring add of {name!r}")
            return False
        self._topics.append(clean)
        self._transcripts.create(clean)
        self._active = clean
        return True

    def delete(self, name: str) -> bool:
        if name == DEFAULT_TOPIC or name not in self._topics:
            logger.debug(f"TopicRegistry: ignoring delete of {name!r}")
            return False
        self._topics.remove(name)
        self._transcripts.drop(name)
        self._active = DEFAULT_TOPIC
        return True

    def set_active(self, name: str) -> None:
        if name not in self._topics:
            raise KeyError(f"Unknown topic: {name!r}")
        self._active = name
