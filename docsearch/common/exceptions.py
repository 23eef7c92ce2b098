"""
Errors raised by the document search engine.
"""


class DocSearchError(Exception):
    """Base class for all document search errors."""
    pass


class SourceIOError(DocSearchError):
    """Raised when a document or index file cannot be opened, read or written."""
    pass


class ExtractionError(DocSearchError):
    """Raised when plain text cannot be pulled out of a document's markup."""
    pass


class SerializationError(DocSearchError):
    """Raised when a persisted index is malformed or cannot be decoded."""
    pass


class TransportError(DocSearchError):
    """Raised when the search server cannot start or deliver a response."""
    pass
