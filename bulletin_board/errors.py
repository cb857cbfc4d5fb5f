"""Exception types raised by the message board."""


class BoardError(RuntimeError):
    """Base error for the message board."""


class TemplateNotFoundError(BoardError):
    """A page template could not be read at startup."""


class MessageStoreError(BoardError):
    """The message file could not be written."""
