from dataclasses import dataclass
from typing import Dict, Tuple

from ..report import format_percentage


@dataclass(frozen=True)
class Document:
    source_path: str
    raw_text: str


@dataclass(frozen=True)
class TokenizedDocument:
    document: Document
    normalized_text: str
    tokens: Tuple[str, ...]
    strategy: str
    vector: Dict[str, int]

    @property
    def source_path(self) -> str:
        return self.document.source_path


@dataclass(frozen=True)
class ComparisonResult:
    original: TokenizedDocument
    copy: TokenizedDocument
    score: float
    rounding: str = "half-up"

    @property
    def percentage(self) -> str:
        return format_percentage(self.score, rounding=self.rounding)
