"""Outbound text helpers."""


def truncate(text: str, limit: int) -> str:
    """Cut ``text`` to ``limit`` characters, ending with ``...`` when cut."""
    if len(text) <= limit:
        return text
    return text[: limit - 3] + "..."
