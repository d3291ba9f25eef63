"""Tests for the topic registry and its transcript bookkeeping."""
import pytest

from topicchat.models import DEFAULT_TOPIC, Message
from topicchat.topics import TopicRegistry
from topicchat.transcripts import TranscriptStore


def make_registry(**kwargs):
    transcripts = TranscriptStore(kwargs.pop("histories", None))
    return TopicRegistry(transcripts, **kwargs), transcripts


def assert_in_sync(registry, transcripts):
    assert set(registry.topics) == set(transcripts)
    assert len(registry) == len(transcripts)


class TestTopicRegistry:
    def test_default_state(self):
        registry, transcripts = make_registry()
        assert registry.topics == (DEFAULT_TOPIC,)
        assert registry.active == DEFAULT_TOPIC
        assert transcripts.get(DEFAULT_TOPIC) == ()

    def test_add_topic_appends_and_activates(self):
        registry, transcripts = make_registry()
        assert registry.add("Work") is True
        assert registry.topics == ("General", "Work")
        assert registry.active == "Work"
        assert transcripts.get("Work") == ()
        assert_in_sync(registry, transcripts)

    @pytest.mark.parametrize("name", ["", "   ", "General"])
    def test_add_invalid_name_is_noop(self, name):
        registry, transcripts = make_registry()
        assert registry.add(name) is False
        assert registry.topics == (DEFAULT_TOPIC,)
        assert registry.active == DEFAULT_TOPIC

    def test_add_duplicate_is_noop(self):
        registry, _ = make_registry()
        registry.add("Work")
        registry.set_active(DEFAULT_TOPIC)
        assert registry.add("Work") is False
        assert registry.topics == ("General", "Work")
        assert registry.active == DEFAULT_TOPIC

    def test_add_collapses_whitespace(self):
        registry, _ = make_registry()
        registry.add("  Side   project ")
        assert registry.topics[-1] == "Side project"
        assert registry.add("Side project") is False

    def test_delete_active_topic_resets_to_default(self):
        registry, transcripts = make_registry()
        registry.add("Work")
        assert registry.delete("Work") is True
        assert registry.active == DEFAULT_TOPIC
        assert "Work" not in registry
        assert "Work" not in transcripts
        assert_in_sync(registry, transcripts)

    def test_delete_inactive_topic_also_resets_active(self):
        registry, _ = make_registry()
        registry.add("Work")
        registry.add("Home")
        registry.delete("Work")
        assert registry.active == DEFAULT_TOPIC
        assert registry.topics == ("General", "Home")

    def test_delete_default_topic_is_noop(self):
        registry, transcripts = make_registry()
        transcripts.append(DEFAULT_TOPIC, Message(role="user", content="hi"))
        registry.add("Work")
        assert registry.delete(DEFAULT_TOPIC) is False
        assert registry.topics == ("General", "Work")
        assert registry.active == "Work"
        assert len(transcripts.get(DEFAULT_TOPIC)) == 1

    def test_delete_unknown_topic_is_noop(self):
        registry, _ = make_registry()
        registry.add("Work")
        assert registry.delete("Nope") is False
        assert registry.active == "Work"

    def test_set_active_unknown_raises(self):
        registry, _ = make_registry()
        with pytest.raises(KeyError):
            registry.set_active("Nope")

    def test_random_sequences_keep_default_and_sync(self):
        registry, transcripts = make_registry()
        ops = [
            ("add", "A"), ("add", "B"), ("delete", "General"), ("add", "A"),
            ("delete", "A"), ("add", ""), ("delete", "B"), ("add", "C"),
            ("delete", "General"), ("add", "General"),
        ]
        for op, name in ops:
            getattr(registry, op)(name)
            assert DEFAULT_TOPIC in registry
            assert DEFAULT_TOPIC in transcripts
            assert registry.active in registry
            assert_in_sync(registry, transcripts)
        assert registry.topics == ("General", "C")

    def test_restores_missing_default_and_orphans(self):
        histories = {"Work": [], "Orphan": [Message(role="user", content="x")]}
        registry, transcripts = make_registry(histories=histories, topics=["Work", "Extra"])
        assert registry.topics == ("General", "Work", "Extra")
        assert "Orphan" not in transcripts
        assert_in_sync(registry, transcripts)

    def test_unknown_active_falls_back_to_default(self):
        registry, _ = make_registry(topics=["General", "Work"], active="Gone")
        assert registry.active == DEFAULT_TOPIC


class TestTranscriptStore:
    def test_append_preserves_order(self):
        transcripts = TranscriptStore()
        transcripts.create("General")
        first = Message(role="user", content="one")
        second = Message(role="assistant", content="two")
        transcripts.append("General", first)
        transcripts.append("General", second)
        assert transcripts.get("General") == (first, second)

    def test_append_unknown_topic_raises(self):
        transcripts = TranscriptStore()
        with pytest.raises(KeyError):
            transcripts.append("Nope", Message(role="user", content="x"))

    def test_get_unknown_topic_is_empty(self):
        assert TranscriptStore().get("Nope") == ()

    def test_clear_keeps_topic(self):
        transcripts = TranscriptStore({"General": [Message(role="user", content="x")]})
        transcripts.clear("General")
        assert "General" in transcripts
        assert transcripts.get("General") == ()

    def test_get_returns_snapshot(self):
        transcripts = TranscriptStore({"General": []})
        view = transcripts.get("General")
        transcripts.append("General", Message(role="user", content="x"))
        assert view == ()
