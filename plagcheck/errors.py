class PlagcheckError(Exception):
    """Base class for errors raised by plagcheck."""


class UsageError(PlagcheckError):
    """Wrong command-line invocation."""


class DocumentIOError(PlagcheckError, OSError):
    """A document or result file could not be read or written."""


class DocumentReadError(DocumentIOError):
    pass


class ResultWriteError(DocumentIOError):
    pass
