"""Facade that turns session state into an outbound completion request."""

from __future__ import annotations
from typing import Optional, Sequence

from ..models import (
    CompletionRequest,
    ImageRequest,
    Message,
    StagedImage,
    TextRequest,
)
from ..services.security import DefaultSecurity
from . import conversation as _conversation


class DefaultRequestBuilder:
    def __init__(self) -> None:
        self.security = DefaultSecurity()

    def build(
        self,
        *,
        draft: str,
        image: Optional[StagedImage],
        history: Sequence[Message],
        tone: str,
    ) -> CompletionRequest:
        message = self.security.clip_for_prompt(draft)
        if image is not None:
            return ImageRequest(
                prompt=_conversation.image_prompt(message=message),
                image=image.data,
                mime_type=image.mime_type,
            )
        return TextRequest(
            prompt=_conversation.text_prompt(history=history, tone=tone, message=message)
        )
