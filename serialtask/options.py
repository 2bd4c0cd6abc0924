"""module for serial task options

The options describe one serial task function: its name, the tasks it runs and the three hooks
that are evaluated once per task index.

.. code-block:: python
    :caption: Example

    from serialtask import create_serial_task

    increment_twice = create_serial_task(
        {
            "name": "increment_twice",
            "tasks": [lambda x: x + 1, lambda x: x + 1],
            "skip_condition": lambda task, index, tasks, args, last: index == 1 and last > 10,
        }
    )

Every hook is called as :code:`hook(task, index, tasks, args, last)` where :code:`task` is the
task at :code:`index`, :code:`tasks` is the very sequence given in the options, :code:`args` are
the arguments of the whole call and :code:`last` is the result of the most recent task that ran
(:data:`serialtask.UNSET` before the first one).
"""

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from attrs import define, field, fields

from serialtask.options_error import (
    InvalidConfigurationError,
    InvalidOptionsSpecificationError,
    UnknownOptionError,
)
from serialtask.util.defaults import (
    DEFAULT_BREAKER,
    DEFAULT_RESULT_WRAPPER,
    DEFAULT_SKIPPER,
    DEFAULT_TASK_NAME,
    UNSET,
)
from serialtask.util.validators import (
    callable_validator,
    sequence_of_callables_validator,
    str_validator,
)

logger = logging.getLogger("Options")

Task = Callable[..., Any]
Hook = Callable[[Task, int, Sequence[Task], tuple, Any], Any]


@define(kw_only=True, frozen=True)
class SerialTaskOptions:
    """Normalized options of a serial task function"""

    name: str = field(default=DEFAULT_TASK_NAME, validator=str_validator)
    """Name of the generated task function. Defaults to :code:`serial_task`."""
    tasks: Sequence[Task] = field(validator=sequence_of_callables_validator)
    """Functions to be executed in order from :code:`0` to :code:`len(tasks) - 1`.
    The sequence is used as given and never copied, so it can be extended while the generated
    task function is running. Newly appended tasks are visited in the same call."""
    break_condition: Hook = field(default=DEFAULT_BREAKER, validator=callable_validator)
    """Stops the loop before running the current task when it returns a truthy value."""
    skip_condition: Hook = field(default=DEFAULT_SKIPPER, validator=callable_validator)
    """Skips the current task when it returns a truthy value."""
    result_wrapper: Hook = field(default=DEFAULT_RESULT_WRAPPER, validator=callable_validator)
    """Returns the arguments the current task is called with. Must return an iterable.
    Defaults to the call arguments for the first task and :code:`(last,)` for all others."""


OPTION_KEYS = frozenset(attribute.name for attribute in fields(SerialTaskOptions))


def normalize(options: Any = UNSET, /, **kwargs) -> SerialTaskOptions:
    """validates options and fills in defaults

    Parameters
    ----------
    options : SerialTaskOptions | Mapping[str, Any]
        the options, either already normalized or as a mapping
    kwargs :
        the options as keyword arguments, only if :code:`options` is not given

    Returns
    -------
    SerialTaskOptions
        the normalized options

    Raises
    ------
    InvalidConfigurationError
        if the options are not a mapping, contain unknown keys or have invalid values
    """
    if options is UNSET:
        options = kwargs
    elif kwargs:
        raise InvalidConfigurationError(
            "options must be given either as a mapping or as keyword arguments, not both"
        )
    if isinstance(options, SerialTaskOptions):
        return options
    if not isinstance(options, Mapping):
        raise InvalidOptionsSpecificationError(options)
    unknown_keys = set(options).difference(OPTION_KEYS)
    if unknown_keys:
        raise UnknownOptionError(unknown_keys)
    if "tasks" not in options:
        raise InvalidConfigurationError("'tasks' must be a sequence of callables")
    normalized = SerialTaskOptions(**options)
    logger.debug(
        "normalized options for '%s' with %d task(s)", normalized.name, len(normalized.tasks)
    )
    return normalized
