"""Tests for wizard steps, sessions and the session manager."""

import pytest

from wizardbot.wizard import (
    CONTENT_SPECS,
    ContentType,
    WizardManager,
    build_prompt,
    get_steps,
)


class TestWizardSteps:
    """Tests for the static step table."""

    @pytest.mark.parametrize(
        "content_type,count",
        [
            (ContentType.MARKETING, 8),
            (ContentType.EMAIL, 6),
            (ContentType.REPORT, 7),
            (ContentType.SCRIPT, 7),
            (ContentType.WHITEPAPER, 7),
            (ContentType.STORY, 6),
            (ContentType.POEM, 5),
        ],
    )
    def test_step_counts(self, content_type, count):
        """Test the number of questions per content type."""
        assert len(get_steps(content_type)) == count

    def test_every_type_has_a_spec(self):
        """Test that the table covers every content type."""
        assert set(CONTENT_SPECS) == set(ContentType)

    def test_poem_key_order(self):
        """Test the fixed poem question order."""
        keys = [step.key for step in get_steps(ContentType.POEM)]
        assert keys == ["style", "topic", "mood", "length", "structure"]

    def test_keys_unique_per_type(self):
        """Test that no content type reuses a question key."""
        for content_type in ContentType:
            keys = [step.key for step in get_steps(content_type)]
            assert len(keys) == len(set(keys))

    def test_unknown_type_has_no_steps(self):
        """Test that an unknown content type yields no steps and no prompt."""
        assert get_steps("limerick") == ()
        assert build_prompt("limerick", {}) == ""

    def test_parse_content_type(self):
        """Test case-insensitive content type parsing."""
        assert ContentType.parse("Poem") is ContentType.POEM
        assert ContentType.parse("nope") is None

    def test_every_answer_lands_in_prompt(self):
        """Test that every key of every type is substituted into its template."""
        for content_type in ContentType:
            answers = {step.key: f"<{step.key}-answer>" for step in get_steps(content_type)}
            prompt = build_prompt(content_type, answers)
            for value in answers.values():
                assert value in prompt


class TestWizardSession:
    """Tests for WizardSession."""

    def test_new_session_starts_at_first_question(self, clock):
        """Test the initial step and question."""
        wizard = WizardManager(clock=clock).start_wizard(1, ContentType.POEM)

        assert wizard.get_step() == 0
        assert wizard.get_current_key() == "style"
        assert wizard.get_current_question().startswith("What style of poem?")
        assert wizard.get_progress() == "(Step 1 of 5)"
        assert wizard.is_complete() is False

    def test_poem_completes_after_five_answers(self, clock):
        """Test that five answers complete a poem wizard and fill the prompt."""
        wizard = WizardManager(clock=clock).start_wizard(1, ContentType.POEM)
        answers = ["haiku", "autumn", "calm", "4", "5-7-5"]

        for answer in answers:
            wizard.set_answer(wizard.get_current_key(), answer)

        assert wizard.is_complete() is True
        prompt = wizard.build_prompt()
        for answer in answers:
            assert answer in prompt
        assert "Length: 4 lines" in prompt

    def test_step_never_decreases(self, clock):
        """Test that the step is non-decreasing and capped at the step count."""
        wizard = WizardManager(clock=clock).start_wizard(1, ContentType.EMAIL)
        steps = []
        for i in range(10):
            wizard.set_answer(wizard.get_current_key(), f"answer {i}")
            steps.append(wizard.get_step())

        assert steps == sorted(steps)
        assert wizard.get_step() == 6
        assert wizard.is_complete() is True

    def test_out_of_range_question_is_empty(self, clock):
        """Test that a complete wizard has no current question or key."""
        wizard = WizardManager(clock=clock).start_wizard(1, ContentType.POEM)
        for _ in range(5):
            wizard.set_answer(wizard.get_current_key(), "x")

        assert wizard.get_current_question() == ""
        assert wizard.get_current_key() == ""

    def test_get_answers_returns_copy(self, clock):
        """Test that the answers snapshot is independent."""
        wizard = WizardManager(clock=clock).start_wizard(1, ContentType.POEM)
        wizard.set_answer("style", "haiku")

        answers = wizard.get_answers()
        answers["style"] = "sonnet"

        assert wizard.get_answer("style") == "haiku"


class TestWizardManager:
    """Tests for WizardManager."""

    def test_get_without_session(self, clock):
        """Test lookup for a user who never started a wizard."""
        assert WizardManager(clock=clock).get_wizard(1) is None

    def test_start_overwrites_existing_session(self, clock):
        """Test that starting again replaces the old session."""
        manager = WizardManager(clock=clock)
        first = manager.start_wizard(1, ContentType.POEM)
        first.set_answer("style", "haiku")

        second = manager.start_wizard(1, ContentType.STORY)

        assert manager.get_wizard(1) is second
        assert second.get_step() == 0
        assert second.content_type is ContentType.STORY

    def test_expired_session_is_removed(self, clock):
        """Test lazy expiry: a lookup past the timeout drops the session."""
        manager = WizardManager(timeout=600, clock=clock)
        manager.start_wizard(1, ContentType.POEM)

        clock.advance(11 * 60)

        assert manager.get_wizard(1) is None
        assert manager.active_count() == 0
        assert manager.get_wizard(1) is None

    def test_session_alive_before_timeout(self, clock):
        """Test that a session survives until the timeout."""
        manager = WizardManager(timeout=600, clock=clock)
        session = manager.start_wizard(1, ContentType.POEM)

        clock.advance(9 * 60)

        assert manager.get_wizard(1) is session

    def test_cancel_is_idempotent(self, clock):
        """Test that cancelling twice, or without a session, is a no-op."""
        manager = WizardManager(clock=clock)
        manager.start_wizard(1, ContentType.POEM)

        manager.cancel_wizard(1)
        manager.cancel_wizard(1)
        manager.end_wizard(2)

        assert manager.get_wizard(1) is None

    def test_sessions_are_per_user(self, clock):
        """Test that users have independent sessions."""
        manager = WizardManager(clock=clock)
        manager.start_wizard(1, ContentType.POEM)

        assert manager.get_wizard(2) is None
        assert manager.get_wizard(1).user_id == 1
