"""Tests for data models."""

import pytest

from wizardbot.models import (
    ChatMessage,
    CompletionResult,
    NamedChat,
    NumericChat,
    Update,
    UpdateKind,
    chat_id_param,
    chat_ref,
    format_chat_id,
    is_valid_chat_id,
)


class TestChatRef:
    """Tests for chat identifiers."""

    def test_chat_ref(self):
        assert chat_ref(42) == NumericChat(42)
        assert chat_ref("@news") == NamedChat("@news")
        assert chat_ref(NumericChat(1)) == NumericChat(1)

    def test_bool_rejected(self):
        with pytest.raises(TypeError):
            chat_ref(True)

    def test_format(self):
        assert format_chat_id(NumericChat(-100123)) == "-100123"
        assert format_chat_id(NamedChat("@news")) == "@news"
        assert chat_id_param(NumericChat(7)) == 7

    def test_validity(self):
        assert is_valid_chat_id(NumericChat(42)) is True
        assert is_valid_chat_id(NumericChat(0)) is False
        assert is_valid_chat_id(NamedChat("  ")) is False


class TestUpdate:
    """Tests for Update parsing and classification."""

    def test_message_update(self):
        update = Update.from_dict(
            {
                "update_id": 9,
                "message": {
                    "message_id": 3,
                    "date": 1700000000,
                    "chat": {"id": -5, "type": "group", "title": "Team"},
                    "from": {"id": 42, "is_bot": False, "username": "ann"},
                    "text": "hi",
                    "reply_to_message": {"message_id": 2, "chat": {"id": -5}},
                },
            }
        )

        assert update.kind is UpdateKind.MESSAGE
        assert update.message.from_user.username == "ann"
        assert update.message.chat.is_private is False
        assert update.message.reply_to_message_id == 2

    def test_callback_update(self):
        update = Update.from_dict(
            {"update_id": 1, "callback_query": {"id": "cb", "from": {"id": 1}, "data": "x"}}
        )
        assert update.kind is UpdateKind.CALLBACK_QUERY

    def test_inline_update(self):
        update = Update.from_dict(
            {"update_id": 1, "inline_query": {"id": "iq", "from": {"id": 1}, "query": "q"}}
        )
        assert update.kind is UpdateKind.INLINE_QUERY
        assert update.inline_query.query == "q"

    def test_unknown_update(self):
        assert Update.from_dict({"update_id": 1, "poll": {}}).kind is UpdateKind.UNKNOWN

    @pytest.mark.parametrize(
        "payload",
        [
            {"update_id": 1, "message": "x"},
            {"update_id": 1, "callback_query": ["cb"]},
            {"update_id": 1, "message": {"message_id": 1, "chat": 5}},
            {"update_id": 1, "message": {"message_id": 1, "chat": {}, "from": "ann"}},
        ],
    )
    def test_non_object_fields_rejected(self, payload):
        with pytest.raises(ValueError, match="expected an object"):
            Update.from_dict(payload)

    def test_message_without_text(self):
        update = Update.from_dict(
            {"update_id": 1, "message": {"message_id": 1, "chat": {"id": 1, "type": "private"}}}
        )
        assert update.message.text == ""
        assert update.message.from_user is None


class TestCompletionResult:
    """Tests for CompletionResult."""

    def test_from_dict(self):
        result = CompletionResult.from_dict(
            {
                "id": "r1",
                "model": "abab5.5-chat",
                "choices": [
                    {"index": 0, "message": {"role": "assistant", "content": "hi"}, "finish_reason": "stop"}
                ],
                "usage": {"prompt_tokens": 1, "completion_tokens": 1, "total_tokens": 2},
            }
        )

        assert result.text == "hi"
        assert result.choices[0].finish_reason == "stop"
        assert result.usage.total_tokens == 2

    def test_no_choices(self):
        result = CompletionResult.from_dict({"id": "r1"})

        assert result.text == ""
        assert result.usage.total_tokens == 0

    def test_chat_message_to_dict(self):
        assert ChatMessage("user", "hi").to_dict() == {"role": "user", "content": "hi"}
