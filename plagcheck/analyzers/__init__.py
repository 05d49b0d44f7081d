from .base import Document, TokenizedDocument, ComparisonResult
from .normalizer import normalize
from .tokenizer import TokenizationStrategy, tokenize, select_strategy
from .vectorizer import vectorize
from .similarity import SimilarityAnalyzer, cosine_score, text_similarity

__all__ = [
    "Document",
    "TokenizedDocument",
    "ComparisonResult",
    "TokenizationStrategy",
    "normalize",
    "tokenize",
    "select_strategy",
    "vectorize",
    "cosine_score",
    "text_similarity",
    "SimilarityAnalyzer",
]
