"""
Exceptions raised by ordered property stores.

Errors coming from the caller's streams (OSError) are never wrapped;
they propagate exactly as the stream raised them.
"""


class OrderedPropertiesError(Exception):
    """Base class for ordered property store failures."""


class FormatError(OrderedPropertiesError, ValueError):
    """
    Raised when properties text or XML cannot be parsed.

    Covers malformed \\uXXXX escape sequences in the text format as well as
    truncated or malformed XML and documents that are not rooted at
    <properties>. The parser's own exception is chained as __cause__.

    Entries read before the failure stay in the store; a load is not rolled
    back.
    """

    def __init__(self, source_format, details=None):
        self.source_format = source_format
        self.details = details or "Invalid properties content."
        msg = f"Cannot load {source_format} properties: {self.details}"
        super().__init__(msg)


class InvalidStateError(OrderedPropertiesError):
    """
    Raised when a store is restored from a persisted representation that
    lacks required fields or carries values of the wrong type.
    """

    def __init__(self, missing_or_invalid):
        self.missing_or_invalid = missing_or_invalid
        msg = (
            "Invalid persisted store state: "
            + ", ".join(str(f) for f in missing_or_invalid)
        )
        super().__init__(msg)
