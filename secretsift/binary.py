"""Detection of binary (non-text) content."""

from __future__ import annotations

_ALLOWED_CONTROL = frozenset((9, 10, 13))


def is_binary_content(content: bytes) -> bool:
    """True if the bytes look binary: a NUL byte, or over 10% control bytes."""
    if not content:
        return False
    if 0 in content:
        return True
    non_printable = sum(1 for b in content if b < 32 and b not in _ALLOWED_CONTROL)
    return non_printable > len(content) // 10