from .io import read_document, write_result

__all__ = ["read_document", "write_result"]
