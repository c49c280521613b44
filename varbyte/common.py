from typing import Optional


# -----------------------------------------------------------------------------

BYTE_SIZE = 8

# Widths of the typed write entry points, smallest first.
WIDTHS = (8, 16, 32, 64)


# -----------------------------------------------------------------------------

class InvalidArgument(ValueError):
    "A bit count or value does not fit the width of the entry point."


class SinkError(OSError):
    """
    The byte sink rejected a write.

    The underlying exception, if any, is available as `cause` and is also
    chained as `__cause__`.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
