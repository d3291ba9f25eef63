"""
Purpose: Guardrails for inputs.
Content: predictable cleanup of user text before it reaches a prompt or the
topic list; prevents oversized requests.
"""

MAX_INPUT_CHARS = 8000
MAX_TOPIC_CHARS = 80


class DefaultSecurity:
    def sanitize_for_prompt(self, text: str) -> str:
        return (text or "").replace("\x00", "").strip()

    def clip_for_prompt(self, text: str) -> str:
        text = self.sanitize_for_prompt(text)
        if len(text) > MAX_INPUT_CHARS:
            text = text[:MAX_INPUT_CHARS]
        return text

    def normalize_topic_name(self, name: str) -> str:
        """Collapse whitespace; an all-blank name comes back empty."""
        clean = " ".join((name or "").replace("\x00", "").split())
        return clean[:MAX_TOPIC_CHARS]
