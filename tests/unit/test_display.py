"""Tests for the display message list model."""

import pytest

from launcher_ai.ai.display import DisplaySink, MessageListModel, replace_all
from launcher_ai.ai.types import Message

A = Message(role="user", content="a")
B = Message(role="assistant", content="b")
C = Message(role="user", content="c")


class TestMessageListModel:
    def test_is_display_sink(self):
        assert isinstance(MessageListModel(), DisplaySink)

    def test_initial_items(self):
        model = MessageListModel([A, B])
        assert model.n_items() == 2
        assert list(model) == [A, B]
        assert model[1] == B

    def test_splice_inserts_and_removes(self):
        model = MessageListModel([A, B])
        model.splice(1, 1, [C])
        assert model.items() == [A, C]

    def test_splice_notifies_listeners(self):
        calls = []
        model = MessageListModel([A])
        model.connect(lambda pos, removed, added: calls.append((pos, removed, added)))

        model.splice(0, 1, [A, B, C])

        assert calls == [(0, 1, 3)]

    def test_replace_all(self):
        model = MessageListModel([A, B])
        model.replace_all([C])
        assert model.items() == [C]

    def test_replace_all_helper(self):
        model = MessageListModel([A])
        replace_all(model, [B, C])
        assert model.items() == [B, C]

    def test_items_is_a_copy(self):
        model = MessageListModel([A])
        model.items().append(B)
        assert len(model) == 1

    def test_splice_position_out_of_range(self):
        with pytest.raises(IndexError):
            MessageListModel([A]).splice(2, 0, [B])

    def test_splice_too_many_removals(self):
        with pytest.raises(IndexError):
            MessageListModel([A]).splice(0, 2, [])
