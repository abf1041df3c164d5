class InvalidQuery(ValueError):
    """Raised when a caller submits a blank policy name or chat message."""


class EmptyMessage(InvalidQuery):
    pass


class ConversationBusy(RuntimeError):
    """A conversation already has a user turn awaiting its response."""
