"""Default values for serialtask."""


class _Unset:
    """Marker for values that were never set.

    There is exactly one instance, :data:`UNSET`. It is falsy and distinct from :code:`None`,
    which is an ordinary task result.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return "UNSET"


UNSET = _Unset()
"""The value of :code:`TaskReturn.value` before any task ran and of every untouched results slot."""

DEFAULT_TASK_NAME = "serial_task"

NOT_BROKEN = -1
"""Value of :code:`TaskReturn.break_at` when the loop ran to completion."""


# one shared instance per default hook for all options that omit them
def DEFAULT_BREAKER(*_) -> bool:  # pylint: disable=invalid-name
    """Never breaks."""
    return False


DEFAULT_SKIPPER = DEFAULT_BREAKER


def DEFAULT_RESULT_WRAPPER(_task, index, _tasks, args, last):  # pylint: disable=invalid-name
    """Pass the call arguments to the first task and the last result to every other task."""
    return args if index == 0 else (last,)
