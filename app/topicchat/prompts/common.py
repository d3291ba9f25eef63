"""Shared prompt helpers used across prompt modules."""

from __future__ import annotations
from typing import Sequence

from ..models import Message

ROLE_LABELS = {"user": "User", "assistant": "Assistant"}


def render_transcript(history: Sequence[Message]) -> str:
    """Linear role-tagged script, oldest first."""
    return "\n".join(f"{ROLE_LABELS[m.role]}: {m.content}" for m in history)
