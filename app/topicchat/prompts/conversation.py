"""Conversation prompts (text continuation, image description)"""

from __future__ import annotations
from textwrap import dedent
from typing import Sequence

from ..models import DEFAULT_IMAGE_PROMPT, Message
from .common import render_transcript


def text_prompt(*, history: Sequence[Message], tone: str, message: str) -> str:
    return dedent(
        """\
        Previous conversation:
        {context}

        Please respond in a {tone} tone to the following message: {message}"""
    ).format(context=render_transcript(history), tone=tone, message=message)


def image_prompt(*, message: str) -> str:
    # image requests are single-turn, no history
    return message or DEFAULT_IMAGE_PROMPT
