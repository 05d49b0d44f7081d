from collections import Counter
from typing import Dict, Iterable

FrequencyVector = Dict[str, int]


def vectorize(tokens: Iterable[str]) -> FrequencyVector:
    """Count token occurrences. Empty-string tokens are skipped."""
    return dict(Counter(t for t in tokens if t))
