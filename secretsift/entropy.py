"""Shannon entropy checks for judging how random a candidate secret is."""

from __future__ import annotations

import enum
import math
import string
from collections import Counter

_HEX_DIGITS = frozenset(string.hexdigits)


def calculate_entropy(text: str) -> float:
    """Return the Shannon entropy of a string, in bits per character."""
    if not text:
        return 0.0
    length = len(text.encode("utf-8"))
    entropy = 0.0
    for count in Counter(text).values():
        p = count / length
        entropy -= p * math.log2(p)
    return entropy


class Charset(enum.Enum):
    """Character set of a candidate secret, used to choose a threshold."""

    HEX = "hex"
    BASE64 = "base64"
    ALPHANUMERIC = "alphanumeric"

    def threshold(self) -> float:
        """Entropy at or above which a string of this charset looks random."""
        return {
            Charset.HEX: 3.0,
            Charset.BASE64: 4.5,
            Charset.ALPHANUMERIC: 4.0,
        }[self]

    @classmethod
    def detect(cls, text: str) -> "Charset":
        """Guess the charset from the string's content."""
        has_upper = any("A" <= c <= "Z" for c in text)
        has_base64_special = any(c in "+/=" for c in text)
        all_hex = all(c in _HEX_DIGITS for c in text)
        if all_hex and len(text.encode("utf-8")) > 8 and not has_upper:
            return cls.HEX
        if has_base64_special:
            return cls.BASE64
        return cls.ALPHANUMERIC


def is_high_entropy(text: str) -> bool:
    """True if the string's entropy reaches the threshold for its charset."""
    return calculate_entropy(text) >= Charset.detect(text).threshold()


def exceeds_threshold(text: str, threshold: float) -> bool:
    """True if the string's entropy reaches an explicit threshold."""
    return calculate_entropy(text) >= threshold