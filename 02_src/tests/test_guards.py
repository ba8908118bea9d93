"""Tests for RateLimiter and ProcessingGuard."""

from wizardbot.guards import ProcessingGuard, RateLimiter


class TestRateLimiter:
    """Tests for RateLimiter."""

    def test_unknown_user_allowed(self, clock):
        """Test that a user without a record is allowed."""
        limiter = RateLimiter(interval=1.0, clock=clock)
        assert limiter.allow(123) is True

    def test_allow_has_no_side_effects(self, clock):
        """Test that allow() alone never records."""
        limiter = RateLimiter(interval=1.0, clock=clock)
        assert limiter.allow(123) is True
        assert limiter.allow(123) is True

    def test_blocked_right_after_record(self, clock):
        """Test that a user is blocked immediately after a record."""
        limiter = RateLimiter(interval=1.0, clock=clock)
        limiter.record(123)
        assert limiter.allow(123) is False

    def test_allowed_after_interval(self, clock):
        """Test that the user is allowed again once the interval elapses."""
        limiter = RateLimiter(interval=1.0, clock=clock)
        limiter.record(123)

        clock.advance(0.5)
        assert limiter.allow(123) is False

        clock.advance(0.5)
        assert limiter.allow(123) is True

    def test_users_are_independent(self, clock):
        """Test that one user's record does not affect another."""
        limiter = RateLimiter(interval=1.0, clock=clock)
        limiter.record(1)
        assert limiter.allow(2) is True


class TestProcessingGuard:
    """Tests for ProcessingGuard."""

    def test_initially_not_processing(self):
        """Test that nobody is processing initially."""
        guard = ProcessingGuard()
        assert guard.is_processing(123) is False

    def test_try_begin_is_exclusive(self):
        """Test that a second begin fails while the first is outstanding."""
        guard = ProcessingGuard()
        assert guard.try_begin(123) is True
        assert guard.try_begin(123) is False
        assert guard.is_processing(123) is True

    def test_end_releases_user(self):
        """Test that end allows the user to begin again."""
        guard = ProcessingGuard()
        guard.try_begin(123)
        guard.end(123)
        assert guard.is_processing(123) is False
        assert guard.try_begin(123) is True

    def test_end_stamps_rate_limiter(self, clock):
        """Test that finishing a request counts as the rate-limit event."""
        limiter = RateLimiter(interval=1.0, clock=clock)
        guard = ProcessingGuard(rate_limiter=limiter)

        guard.try_begin(123)
        assert limiter.allow(123) is True

        guard.end(123)
        assert limiter.allow(123) is False

    def test_users_are_independent(self):
        """Test that one busy user does not block another."""
        guard = ProcessingGuard()
        guard.try_begin(1)
        assert guard.try_begin(2) is True
