"""Tests for Conversation and ConversationStore."""

from wizardbot.conversation import Conversation, ConversationStore


class TestConversation:
    """Tests for Conversation."""

    def test_messages_keep_insertion_order(self):
        """Test that messages come back in the order they were added."""
        conversation = Conversation()
        conversation.add_message("user", "Hello")
        conversation.add_message("assistant", "Hi there")
        conversation.add_message("user", "How are you?")

        messages = conversation.get_messages()

        assert [(m.role, m.content) for m in messages] == [
            ("user", "Hello"),
            ("assistant", "Hi there"),
            ("user", "How are you?"),
        ]

    def test_get_messages_returns_copy(self):
        """Test that mutating the returned list does not touch the history."""
        conversation = Conversation()
        conversation.add_message("user", "Hello")

        snapshot = conversation.get_messages()
        snapshot.append(snapshot[0])
        snapshot[0].content = "changed"

        messages = conversation.get_messages()
        assert len(messages) == 1
        assert messages[0].content == "Hello"

    def test_clear_keeps_system_prompt(self):
        """Test that clear empties history but keeps the system prompt."""
        conversation = Conversation(system="Be brief")
        conversation.add_message("user", "Hello")

        conversation.clear()

        assert conversation.get_messages() == []
        assert conversation.system == "Be brief"

    def test_set_system_replaces_prompt(self):
        """Test that set_system replaces the system prompt."""
        conversation = Conversation(system="old")
        conversation.set_system("new")
        assert conversation.system == "new"

    def test_build_context_prepends_system(self):
        """Test that build_context puts the system prompt first."""
        conversation = Conversation(system="You are helpful")
        conversation.add_message("user", "Hello")

        context = conversation.build_context()

        assert context[0].role == "system"
        assert context[0].content == "You are helpful"
        assert context[1].content == "Hello"
        assert len(conversation.get_messages()) == 1

    def test_build_context_without_system(self):
        """Test that no system message is added when the prompt is empty."""
        conversation = Conversation()
        conversation.add_message("user", "Hello")

        assert [m.role for m in conversation.build_context()] == ["user"]


class TestConversationStore:
    """Tests for ConversationStore."""

    def test_get_or_create_returns_same_instance(self):
        """Test that repeated calls for one user return one conversation."""
        store = ConversationStore()
        assert store.get_or_create(1) is store.get_or_create(1)

    def test_distinct_users_get_distinct_conversations(self):
        """Test that different users never share a conversation."""
        store = ConversationStore()
        first = store.get_or_create(1)
        second = store.get_or_create(2)

        first.add_message("user", "only for 1")

        assert first is not second
        assert second.get_messages() == []

    def test_clear_unknown_user_is_noop(self):
        """Test that clearing a user without a conversation does not raise."""
        store = ConversationStore()
        store.clear(999)
        assert 999 not in store

    def test_clear_drops_conversation(self):
        """Test that clear removes the stored conversation."""
        store = ConversationStore()
        store.get_or_create(1).add_message("user", "Hello")

        store.clear(1)

        assert store.get_messages(1) == []
        assert 1 not in store

    def test_default_system_applied_to_new_conversations(self):
        """Test that new conversations receive the configured system prompt."""
        store = ConversationStore(default_system="Be kind")
        assert store.get_or_create(7).system == "Be kind"

    def test_get_messages_for_unknown_user(self):
        """Test that an unknown user has an empty history and none is created."""
        store = ConversationStore()
        assert store.get_messages(5) == []
        assert len(store) == 0
