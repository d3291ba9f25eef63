"""
Topic chat core package.

Topic registry, transcripts, tone selection, request building and the
session controller that ties them to a completion backend and a local store.
The Streamlit UI in app.py only talks to ChatSessionController.
"""

from .controller import ChatSessionController
from .config import AppConfig

__all__ = ["ChatSessionController", "AppConfig"]
