"""abstract module for exceptions"""


class SerialTaskException(Exception):
    """Base class for serialtask related exceptions."""

    def __init__(self, message: str, *args) -> None:
        self.message = message
        super().__init__(message, *args)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SerialTaskException):
            return self.args == other.args
        return NotImplemented

    __hash__ = Exception.__hash__


class ThenableRejectedError(SerialTaskException):
    """Raise if a future-like value rejects with a reason that is not an exception."""

    def __init__(self, reason=None):
        self.reason = reason
        super().__init__(f"future-like value was rejected with reason: {reason!r}")
