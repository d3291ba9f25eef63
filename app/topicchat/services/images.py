"""
Purpose: image staging. Turn a user-picked file into the base64 payload sent
to the backend and a data-URL preview shown in the transcript.
"""

from __future__ import annotations
import base64
from typing import Optional

from ..models import StagedImage


def stage_image(raw: bytes, mime_type: str, name: str = "") -> Optional[StagedImage]:
    """Return a StagedImage, or None when the file is empty or not an image."""
    mime = (mime_type or "").strip().lower()
    if not raw or not mime.startswith("image/"):
        return None
    b64 = base64.b64encode(raw).decode("ascii")
    return StagedImage(
        data=b64,
        mime_type=mime,
        preview=f"data:{mime};base64,{b64}",
        name=name,
    )


def preview_bytes(preview: str) -> bytes:
    """Decode a data-URL preview back to raw bytes for display widgets."""
    _, _, b64 = (preview or "").partition("base64,")
    if not b64:
        return b""
    return base64.b64decode(b64)
