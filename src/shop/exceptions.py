"""Error taxonomy for the shop domain.

``ValidationError`` is protean's own: malformed or missing input. The other
three are raised by the shop code itself. All of them carry a ``messages``
dict keyed by the offending field, the same shape protean uses.
"""

from protean.exceptions import ObjectNotFoundError, ProteanExceptionWithMessage, ValidationError

__all__ = ["ConflictError", "NotFoundError", "StorageError", "ValidationError"]


class NotFoundError(ObjectNotFoundError):
    """Well-formed input that refers to a customer, shop item, category or order that does not exist."""

    def __init__(self, messages):
        super().__init__(messages)
        self.messages = messages


class ConflictError(ProteanExceptionWithMessage):
    """A uniqueness rule would be broken, e.g. a customer email already in use."""


class StorageError(ProteanExceptionWithMessage):
    """The underlying store failed in a way the domain did not anticipate."""
