"""Chat-completion request and response models."""

from dataclasses import asdict, dataclass, field
from typing import Any, Literal

Role = Literal["user", "assistant", "system"]

DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 2048


@dataclass
class ChatMessage:
    """A single ``{role, content}`` entry of a conversation."""

    role: Role
    content: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


@dataclass
class CompletionParams:
    """Optional generation parameters. Non-positive values mean unset."""

    temperature: float = 0.0
    max_tokens: int = 0
    top_p: float = 0.0


@dataclass
class Usage:
    """Token usage counters reported by the upstream."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "Usage":
        data = data or {}
        return cls(
            prompt_tokens=int(data.get("prompt_tokens", 0) or 0),
            completion_tokens=int(data.get("completion_tokens", 0) or 0),
            total_tokens=int(data.get("total_tokens", 0) or 0),
        )


@dataclass
class Choice:
    """One generated alternative."""

    index: int
    message: ChatMessage
    finish_reason: str = ""


@dataclass
class CompletionResult:
    """Parsed completion response."""

    id: str = ""
    model: str = ""
    choices: list[Choice] = field(default_factory=list)
    usage: Usage = field(default_factory=Usage)

    @property
    def text(self) -> str:
        """Text of the first choice, or empty if the upstream returned none."""
        if not self.choices:
            return ""
        return self.choices[0].message.content

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CompletionResult":
        choices = []
        for raw in data.get("choices") or []:
            message = raw.get("message") or {}
            choices.append(
                Choice(
                    index=int(raw.get("index", len(choices)) or 0),
                    message=ChatMessage(
                        role=message.get("role", "assistant") or "assistant",
                        content=message.get("content", "") or "",
                    ),
                    finish_reason=raw.get("finish_reason", "") or "",
                )
            )
        return cls(
            id=str(data.get("id", "") or ""),
            model=str(data.get("model", "") or ""),
            choices=choices,
            usage=Usage.from_dict(data.get("usage")),
        )
