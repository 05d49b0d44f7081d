import re
import logging
from enum import Enum
from typing import Callable, Dict, List

from .normalizer import is_punctuation

logger = logging.getLogger(__name__)

# CJK Unified Ideographs, basic block only. Extension blocks, kana and
# hangul do not switch a text to character-wise mode.
_CJK_RE = re.compile("[\u4e00-\u9fa5]")


class TokenizationStrategy(str, Enum):
    CHARACTER = "character"
    WHITESPACE = "whitespace"


def contains_cjk(text: str) -> bool:
    return bool(text) and _CJK_RE.search(text) is not None


def split_characters(text: str) -> List[str]:
    """One token per character, skipping whitespace and punctuation."""
    return [ch for ch in text if not ch.isspace() and not is_punctuation(ch)]


def split_whitespace(text: str) -> List[str]:
    """Split on whitespace runs; str.split() never yields empty tokens."""
    return text.split()


_STRATEGIES: Dict[TokenizationStrategy, Callable[[str], List[str]]] = {
    TokenizationStrategy.CHARACTER: split_characters,
    TokenizationStrategy.WHITESPACE: split_whitespace,
}


def select_strategy(text: str) -> TokenizationStrategy:
    """
    Pick the tokenization strategy for a normalized text.

    A single CJK ideograph anywhere switches the whole text to
    character-wise splitting, Latin words included: "java编程" yields
    ["j", "a", "v", "a", "编", "程"]. This keeps scores comparable with
    earlier releases and must not be narrowed to the CJK spans only.
    """
    if contains_cjk(text):
        return TokenizationStrategy.CHARACTER
    return TokenizationStrategy.WHITESPACE


def tokenize(text: str) -> List[str]:
    """Split normalized text into tokens. Empty input gives an empty list."""
    if not text:
        return []

    strategy = select_strategy(text)
    tokens = _STRATEGIES[strategy](text)
    logger.debug(
        f"Tokenized {len(text)} chars into {len(tokens)} tokens ({strategy.value})"
    )
    return tokens
