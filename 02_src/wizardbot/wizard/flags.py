"""Parsing of ``/create`` arguments and quick-mode prompt composition."""

import re
from dataclasses import dataclass, field

from .steps import ContentType

_FLAG_RE = re.compile(r"^-([A-Za-z])$")

# Flags that take the following words as their value.
VALUE_FLAGS = frozenset({"t", "m", "s"})


@dataclass
class CreateArgs:
    """Parsed ``/create`` arguments."""

    content_type: str = ""
    flags: dict[str, str] = field(default_factory=dict)

    @property
    def quick(self) -> bool:
        """Quick mode composes the prompt directly from ``-t``."""
        return bool(self.flags.get("t"))


def parse_create_args(args: str) -> CreateArgs:
    """Split ``"<type> [-t text] [-m instructions] [-s style]"``.

    A value flag consumes every following word up to the next flag.
    Unknown single-letter flags are recorded as ``"true"``. Words after
    the content type that precede any flag are ignored.
    """
    result = CreateArgs()
    words: list[str] = []
    current: str | None = None
    values: dict[str, list[str]] = {}

    for token in args.split():
        match = _FLAG_RE.match(token)
        if match:
            name = match.group(1).lower()
            if name in VALUE_FLAGS:
                current = name
                values.setdefault(name, [])
            else:
                current = None
                result.flags[name] = "true"
            continue
        if current is not None:
            values[current].append(token)
        else:
            words.append(token)

    for name, parts in values.items():
        result.flags[name] = " ".join(parts)

    if words:
        result.content_type = words[0].lower()
    return result


def resolve_content_type(name: str) -> ContentType | None:
    return ContentType.parse(name) if name else None


def build_quick_prompt(flags: dict[str, str]) -> str:
    """Compose a prompt from ``-t`` text, ``-m`` instructions and ``-s`` style."""
    prompt = flags.get("t", "")
    if flags.get("m"):
        prompt = f"{flags['m']}: {prompt}"
    if flags.get("s"):
        prompt += f" (style: {flags['s']})"
    return prompt
