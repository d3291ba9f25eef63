"""Tone preference: one current tone plus the ordered alternatives."""

from __future__ import annotations
import logging
from typing import Any, Iterable, Optional

from .models import DEFAULT_TONE, KNOWN_TONES

logger = logging.getLogger(__name__)


class ToneSelector:
    """Rotates tones between the "current" slot and the available list.

    Selecting an available tone makes it current and moves the previous
    current tone to the end of `available`. Membership never changes.
    """

    def __init__(
        self,
        current: str = DEFAULT_TONE,
        available: Optional[Iterable[str]] = None,
    ):
        if available is None:
            available = [t for t in KNOWN_TONES if t != current]
        available = list(available)
        if current in available or len(set(available)) != len(available):
            raise ValueError("Tone labels must be unique and exclude the current tone.")
        self._current = current
        self._available = available

    @property
    def current(self) -> str:
        return self._current

    @property
    def available(self) -> tuple[str, ...]:
        return tuple(self._available)

    @property
    def options(self) -> tuple[str, ...]:
        return (self._current, *self._available)

    def select(self, label: str) -> bool:
        if label not in self._available:
            logger.debug(f"ToneSelector: ignoring select of {label!r}")
            return False
        self._available.remove(label)
        self._available.append(self._current)
        self._current = label
        return True

    @staticmethod
    def display_label(label: str) -> str:
        return label[:1].upper() + label[1:]

    def to_dict(self) -> dict[str, Any]:
        return {"current": self._current, "available": list(self._available)}

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "ToneSelector":
        """Rebuild a selector; anything but a rotation of the known tones is rejected."""
        current = d.get("current")
        available = d.get("available")
        if not isinstance(current, str) or not isinstance(available, list):
            raise ValueError("Malformed tone record.")
        if not all(isinstance(t, str) for t in available):
            raise ValueError("Malformed tone record.")
        if sorted([current, *available]) != sorted(KNOWN_TONES):
            raise ValueError(f"Unknown tone set: {[current, *available]!r}")
        return cls(current=current, available=available)
