"""plagcheck - cosine similarity scoring for plagiarism screening."""

__version__ = "0.1.0"
