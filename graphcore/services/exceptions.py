# graphcore/services/exceptions.py

class RecordReadError(Exception):
    """Base class for failures while reading one data set record."""

    def __init__(self, message: str, line: str = ""):
        super().__init__(message)
        self.line = line


class RecordParseError(RecordReadError):
    """Raised when a record line holds a malformed or out-of-range token."""
    pass


class StreamReadError(RecordReadError):
    """Raised when the underlying stream fails for a reason other than end of data."""
    pass


class LineTooLongError(RecordReadError):
    """Raised when a record line exceeds the configured maximum length."""
    pass
