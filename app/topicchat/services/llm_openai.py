"""
Purpose: Thin client wrapper around OpenAI (or other LLMs later).
One place for auth, retries, model options and response normalization.

Extensibility:
- Add other providers without touching the controller; anything with a
  `complete(request, settings) -> str` method will do.
- Add streaming support later behind the same interface.

Testing: Mock SDK calls; assert it maps text/image requests and errors correctly.
"""

from __future__ import annotations
import logging
import time
from typing import Any, Optional, Sequence

from openai import APITimeoutError, OpenAI, RateLimitError

from ..interfaces import CompletionError
from ..models import CompletionRequest, ImageRequest, LLMSettings, TextRequest

logger = logging.getLogger(__name__)

RETRY_DELAYS = (0.5, 1.0, 2.0)


class OpenAICompletionClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        client: Any = None,
        retry_delays: Sequence[float] = RETRY_DELAYS,
    ):
        self.retry_delays = tuple(retry_delays)
        if client is not None:
            self.client = client
            return
        self.api_key = api_key
        if not self.api_key:
            raise RuntimeError("Missing OPENAI_API_KEY")
        try:
            self.client = OpenAI(api_key=self.api_key)
        except Exception as e:
            raise RuntimeError(f"Failed to initialize OpenAI client: {e}") from e

    def _with_retries(self, fn, *args, **kwargs):
        for delay in self.retry_delays:
            try:
                return fn(*args, **kwargs)
            except (RateLimitError, APITimeoutError) as e:
                logger.warning(f"OpenAICompletionClient: {type(e).__name__}, retrying in {delay}s")
                time.sleep(delay)
        return fn(*args, **kwargs)

    @staticmethod
    def to_messages(request: CompletionRequest) -> list[dict[str, Any]]:
        if isinstance(request, ImageRequest):
            data_url = f"data:{request.mime_type};base64,{request.image}"
            return [
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": request.prompt},
                        {"type": "image_url", "image_url": {"url": data_url}},
                    ],
                }
            ]
        if isinstance(request, TextRequest):
            return [{"role": "user", "content": request.prompt}]
        raise TypeError(f"Unsupported request type: {type(request).__name__}")

    def complete(self, request: CompletionRequest, settings: LLMSettings) -> str:
        messages = self.to_messages(request)

        def call_cc():
            return self.client.chat.completions.create(
                model=settings.model,
                messages=messages,
                temperature=settings.temperature,
                top_p=settings.top_p,
                max_tokens=settings.max_tokens,
            )

        cc = self._with_retries(call_cc)
        try:
            text = cc.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as e:
            raise CompletionError(f"Malformed completion response: {e}") from e
        if not isinstance(text, str) or not text.strip():
            raise CompletionError("Completion response contained no text.")

        usage = getattr(cc, "usage", None)
        logger.info(
            f"OpenAICompletionClient: {type(request).__name__} via {getattr(cc, 'model', settings.model)}"
            f" (tokens in={getattr(usage, 'prompt_tokens', 0) if usage else 0},"
            f" out={getattr(usage, 'completion_tokens', 0) if usage else 0})"
        )
        return text
