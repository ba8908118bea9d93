"""Wizard sessions and their manager."""

import threading
import time
from dataclasses import dataclass, field

from ..guards import Clock
from .steps import ContentType, build_prompt, get_steps

DEFAULT_WIZARD_TIMEOUT = 10 * 60.0


@dataclass
class WizardSession:
    """A user's in-progress question/answer sequence."""

    user_id: int
    content_type: ContentType
    started_at: float
    answers: dict[str, str] = field(default_factory=dict)
    step: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    @property
    def total_steps(self) -> int:
        return len(get_steps(self.content_type))

    def get_step(self) -> int:
        with self._lock:
            return self.step

    def set_answer(self, key: str, value: str) -> None:
        """Record an answer and advance to the next step."""
        with self._lock:
            self.answers[key] = value
            if self.step < self.total_steps:
                self.step += 1

    def get_answer(self, key: str) -> str:
        with self._lock:
            return self.answers.get(key, "")

    def get_answers(self) -> dict[str, str]:
        with self._lock:
            return dict(self.answers)

    def is_complete(self) -> bool:
        return self.get_step() >= self.total_steps

    def get_current_question(self) -> str:
        steps = get_steps(self.content_type)
        index = self.get_step()
        if index >= len(steps):
            return ""
        return steps[index].question

    def get_current_key(self) -> str:
        steps = get_steps(self.content_type)
        index = self.get_step()
        if index >= len(steps):
            return ""
        return steps[index].key

    def get_progress(self) -> str:
        """Human-readable ``(Step X of N)`` for the current question."""
        total = self.total_steps
        if not total:
            return ""
        return f"(Step {min(self.get_step() + 1, total)} of {total})"

    def build_prompt(self) -> str:
        return build_prompt(self.content_type, self.get_answers())


class WizardManager:
    """Holds at most one wizard session per user.

    Sessions expire lazily: an idle session is removed the next time it is
    looked up, not by a background sweep.
    """

    def __init__(self, timeout: float = DEFAULT_WIZARD_TIMEOUT, clock: Clock = time.monotonic):
        self._lock = threading.Lock()
        self._sessions: dict[int, WizardSession] = {}
        self._timeout = timeout
        self._clock = clock

    def start_wizard(self, user_id: int, content_type: ContentType) -> WizardSession:
        """Create a fresh session at step 0, replacing any existing one."""
        session = WizardSession(
            user_id=user_id,
            content_type=content_type,
            started_at=self._clock(),
        )
        with self._lock:
            self._sessions[user_id] = session
        return session

    def get_wizard(self, user_id: int) -> WizardSession | None:
        """Return the user's live session, dropping it if it has expired."""
        with self._lock:
            session = self._sessions.get(user_id)
            if session is None:
                return None
            if self._clock() - session.started_at > self._timeout:
                del self._sessions[user_id]
                return None
            return session

    def end_wizard(self, user_id: int) -> None:
        with self._lock:
            self._sessions.pop(user_id, None)

    def cancel_wizard(self, user_id: int) -> None:
        self.end_wizard(user_id)

    def active_count(self) -> int:
        """Sessions currently held, including ones not yet found expired."""
        with self._lock:
            return len(self._sessions)
