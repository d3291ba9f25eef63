"""
Canonical data shapes, shared truth for typing/validation between layers.

Typical contents:
- Message (role, content, optional image preview).
- StagedImage (base64 payload + preview for display).
- TextRequest / ImageRequest, the two outbound request shapes.
- LLMSettings (model, temperature, top_p, max_tokens).

Testing: Trivial; mostly types. Serialization helpers are covered by the
persistence tests.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Literal, Optional, Union

DEFAULT_TOPIC = "General"

KNOWN_TONES = ("casual", "friendly", "professional")
DEFAULT_TONE = "casual"

ERROR_REPLY = "Sorry, I encountered an error. Please try again."
DEFAULT_IMAGE_PROMPT = "What's in this image?"

Role = Literal["user", "assistant"]


@dataclass(frozen=True)
class Message:
    role: Role
    content: str
    image: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"role": self.role, "content": self.content}
        if self.image:
            d["image"] = self.image
        return d

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "Message":
        role = d.get("role")
        if role not in ("user", "assistant"):
            raise ValueError(f"Unknown message role: {role!r}")
        content = d.get("content", "")
        if not isinstance(content, str):
            raise ValueError("Message content must be a string.")
        image = d.get("image")
        if image is not None and not isinstance(image, str):
            raise ValueError("Message image must be a string.")
        return cls(role=role, content=content, image=image or None)


@dataclass(frozen=True)
class StagedImage:
    """An image picked by the user and waiting to be sent."""

    data: str
    mime_type: str
    preview: str
    name: str = ""


@dataclass(frozen=True)
class TextRequest:
    prompt: str


@dataclass(frozen=True)
class ImageRequest:
    prompt: str
    image: str
    mime_type: str = "image/jpeg"


CompletionRequest = Union[TextRequest, ImageRequest]


@dataclass
class LLMSettings:
    model: str
    temperature: float = 0.7
    top_p: float = 1.0
    max_tokens: int = 512
