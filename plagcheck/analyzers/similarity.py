import math
import logging
from typing import List, Mapping

import numpy as np
from sklearn.feature_extraction import DictVectorizer
from sklearn.metrics.pairwise import cosine_similarity

from .base import TokenizedDocument
from .normalizer import normalize
from .tokenizer import tokenize
from .vectorizer import vectorize

logger = logging.getLogger(__name__)


def cosine_score(vec_a: Mapping[str, int], vec_b: Mapping[str, int]) -> float:
    """
    Cosine similarity of two term-frequency vectors, in [0, 1].

    Every key of the union vocabulary is visited once. Sums are kept as
    integers so the only rounding happens in the final sqrt and division.
    Returns 0.0 when either vector is all zeros.
    """
    dot = 0
    norm_a = 0
    norm_b = 0
    for word in vec_a.keys() | vec_b.keys():
        count_a = vec_a.get(word, 0)
        count_b = vec_b.get(word, 0)
        dot += count_a * count_b
        norm_a += count_a * count_a
        norm_b += count_b * count_b

    if norm_a == 0 or norm_b == 0:
        return 0.0

    score = dot / math.sqrt(norm_a * norm_b)
    return min(max(score, 0.0), 1.0)


def text_similarity(text_a: str, text_b: str) -> float:
    """Normalize, tokenize and vectorize two raw texts, then score them."""
    vec_a = vectorize(tokenize(normalize(text_a)))
    vec_b = vectorize(tokenize(normalize(text_b)))
    return cosine_score(vec_a, vec_b)


class SimilarityAnalyzer:
    """
    Pairwise cosine similarity across a batch of tokenized documents.

    The single-pair path is cosine_score(); pairwise_matrix() scores many
    documents at once through a sparse document-term matrix. Both use raw
    term counts (no IDF weighting), so a matrix cell equals the
    cosine_score() of the same two documents.
    """

    def score(self, doc_a: TokenizedDocument, doc_b: TokenizedDocument) -> float:
        return cosine_score(doc_a.vector, doc_b.vector)

    def pairwise_matrix(self, docs: List[TokenizedDocument]) -> np.ndarray:
        """
        Return an (n, n) array whose [i, j] cell is the score of docs i and j.

        Documents with no tokens score 0.0 against everything, themselves
        included.
        """
        n = len(docs)
        if n == 0:
            return np.zeros((0, 0))

        if not any(d.vector for d in docs):
            logger.warning("All documents are empty; similarity matrix is zero")
            return np.zeros((n, n))

        vectorizer = DictVectorizer(dtype=np.float64)
        matrix = vectorizer.fit_transform([d.vector for d in docs])
        logger.debug(
            f"Built {matrix.shape[0]}x{matrix.shape[1]} document-term matrix"
        )

        scores = cosine_similarity(matrix)
        empty = [i for i, d in enumerate(docs) if not d.vector]
        scores[empty, :] = 0.0
        scores[:, empty] = 0.0
        return np.clip(scores, 0.0, 1.0)
