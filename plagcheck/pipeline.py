import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .analyzers.base import ComparisonResult, Document, TokenizedDocument
from .analyzers.normalizer import normalize
from .analyzers.similarity import SimilarityAnalyzer, cosine_score
from .analyzers.tokenizer import select_strategy, tokenize
from .analyzers.vectorizer import vectorize
from .report import ROUNDING_MODES
from .utils.io import read_document, write_result

logger = logging.getLogger(__name__)


class Pipeline:
    """
    plagcheck end-to-end pipeline.

    Stages:
      1. Load      - file to Document via utils.io.read_document
      2. Normalize - lower-case, strip punctuation runs
      3. Tokenize  - character-wise for CJK text, whitespace otherwise
      4. Vectorize - token counts
      5. Score     - cosine similarity of the two count vectors
      6. Output    - percentage string written to the result file

    Usage:
        p = Pipeline()
        result = p.run("orig.txt", "copy.txt", "result.txt")
        print(result.percentage)

    Config keys (all optional):
        encoding: input/output text encoding (default "utf-8")
        report.rounding: "half-up" (default) or "half-even"

    No state is kept between calls; one Pipeline can score any number of
    pairs.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config: Dict[str, Any] = config or {}
        self.encoding: str = self.config.get("encoding", "utf-8")
        self.rounding: str = self.config.get("report", {}).get("rounding", "half-up")
        if self.rounding not in ROUNDING_MODES:
            raise ValueError(f"Unknown rounding mode: {self.rounding!r}")
        self._similarity = SimilarityAnalyzer()

    def analyze(self, document: Document) -> TokenizedDocument:
        """Run normalize, tokenize and vectorize on one loaded document."""
        normalized = normalize(document.raw_text)
        tokens = tokenize(normalized)
        return TokenizedDocument(
            document=document,
            normalized_text=normalized,
            tokens=tuple(tokens),
            strategy=select_strategy(normalized).value,
            vector=vectorize(tokens),
        )

    def compare(self, original: Document, copy: Document) -> ComparisonResult:
        """Score a copy against an original."""
        orig_doc = self.analyze(original)
        copy_doc = self.analyze(copy)
        score = cosine_score(orig_doc.vector, copy_doc.vector)
        logger.debug(
            f"{original.source_path}: {len(orig_doc.tokens)} tokens "
            f"({orig_doc.strategy}), {copy.source_path}: {len(copy_doc.tokens)} "
            f"tokens ({copy_doc.strategy}), score={score:.6f}"
        )
        return ComparisonResult(
            original=orig_doc, copy=copy_doc, score=score, rounding=self.rounding
        )

    def compare_files(
        self, original_path: Union[str, Path], copy_path: Union[str, Path]
    ) -> ComparisonResult:
        original = read_document(original_path, encoding=self.encoding)
        copy = read_document(copy_path, encoding=self.encoding)
        return self.compare(original, copy)

    def run(
        self,
        original_path: Union[str, Path],
        copy_path: Union[str, Path],
        result_path: Union[str, Path],
    ) -> ComparisonResult:
        """
        Score two files and write the percentage to result_path.

        Both inputs are read before anything is written, so a read failure
        leaves no result file behind.
        """
        result = self.compare_files(original_path, copy_path)
        write_result(result_path, result.percentage, encoding=self.encoding)
        logger.info(f"Similarity {result.percentage} written to {result_path}")
        return result

    def compare_many(
        self,
        original_path: Union[str, Path],
        copy_paths: List[Union[str, Path]],
    ) -> List[ComparisonResult]:
        """
        Score several candidate copies against one original.

        Returns one ComparisonResult per copy, in input order. Any read
        failure aborts the whole batch.
        """
        from rich.progress import Progress, SpinnerColumn

        paths = [Path(original_path)] + [Path(p) for p in copy_paths]
        docs: List[TokenizedDocument] = []

        with Progress(
            SpinnerColumn(), *Progress.get_default_columns(), transient=True
        ) as progress:
            task = progress.add_task("Loading documents...", total=len(paths))
            for path in paths:
                progress.update(task, description=f"Loading {path.name}...")
                docs.append(self.analyze(read_document(path, encoding=self.encoding)))
                progress.update(task, advance=1)

        matrix = self._similarity.pairwise_matrix(docs)
        original = docs[0]
        return [
            ComparisonResult(
                original=original,
                copy=doc,
                score=float(matrix[0, i]),
                rounding=self.rounding,
            )
            for i, doc in enumerate(docs[1:], start=1)
        ]
