import re
import logging
import unicodedata
from typing import Optional

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")


def is_punctuation(char: str) -> bool:
    """True for any character in a Unicode punctuation category (Pc, Pd, Ps, Pe, Pi, Pf, Po)."""
    return unicodedata.category(char).startswith("P")


def normalize(text: Optional[str]) -> str:
    """
    Lower-case text and collapse punctuation/whitespace runs to single spaces.

    Punctuation is matched by Unicode category, so full-width CJK marks
    such as "，" and "。" are stripped the same way as ASCII ones. Symbols
    and digits are kept: "C++ 123" becomes "c++ 123".

    Returns an empty string for None or empty input.
    """
    if not text:
        return ""

    lowered = text.lower()
    spaced = "".join(" " if is_punctuation(ch) else ch for ch in lowered)
    normalized = _WHITESPACE_RE.sub(" ", spaced).strip()

    logger.debug(f"Normalized {len(text)} chars to {len(normalized)}")
    return normalized
