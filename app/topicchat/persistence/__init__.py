from .session_store import InMemorySessionStore, JsonFileSessionStore

__all__ = ["InMemorySessionStore", "JsonFileSessionStore"]
