"""Exceptions raised by the email builder."""


class EmailException(Exception):
    """Raised when builder input cannot be turned into a valid email part.

    Unlike `ValueError`, which signals a caller programming error, this is
    a recoverable condition: for example an embedded image whose name could
    not be resolved from either the argument or its data source.
    """


__all__ = ["EmailException"]
