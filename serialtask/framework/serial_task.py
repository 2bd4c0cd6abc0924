"""This module builds synchronous serial task functions.

A serial task function runs a sequence of tasks in order and passes the result of each task on
to the next one. Use :func:`create_serial_task_async` instead if any task or hook is
asynchronous.

.. code-block:: python
    :caption: Example

    from serialtask import create_serial_task

    compute = create_serial_task(tasks=[lambda x: x + 1, lambda x: x * 2, lambda x: x - 1])
    result = compute(5)
    assert result.value == 11
    assert result.results == [6, 12, 11]
"""

import itertools
import logging
from typing import Any, Callable

from serialtask.framework.task_return import TaskReturn, pad_results, store_result
from serialtask.options import normalize
from serialtask.util.decorators import decorate, function_arity
from serialtask.util.defaults import NOT_BROKEN, UNSET

logger = logging.getLogger("SerialTask")


def create_serial_task(options: Any = UNSET, /, **kwargs) -> Callable[..., TaskReturn]:
    """Creates a function that executes the given tasks in order.

    For every index the result wrapper is called first, then the break condition and then the
    skip condition, each with :code:`(task, index, tasks, args, last)`. Unless the loop breaks
    or the task is skipped, the task is called with the wrapped arguments and its result
    becomes :code:`last`.

    The generated function is named after :code:`options.name` and its :code:`arity` is the
    arity of the first task.

    Parameters
    ----------
    options : SerialTaskOptions | Mapping[str, Any]
        the options, see :class:`serialtask.options.SerialTaskOptions`
    kwargs :
        the options as keyword arguments instead of a mapping

    Returns
    -------
    Callable[..., TaskReturn]
        the serial task function

    Raises
    ------
    InvalidConfigurationError
        if the options are invalid
    """
    options = normalize(options, **kwargs)
    name = options.name
    tasks = options.tasks
    break_condition = options.break_condition
    skip_condition = options.skip_condition
    result_wrapper = options.result_wrapper

    if len(tasks) == 0:
        # emptiness is decided once, tasks appended later are not picked up
        def trivial_task(*_):
            logger.debug("'%s' has no tasks, returning trivial result", name)
            return TaskReturn.trivial_return()

        return decorate(trivial_task, name, 0)

    def serial_task(*args) -> TaskReturn:
        last = UNSET
        results = pad_results([], len(tasks))
        break_at = NOT_BROKEN
        skipped = []

        for index in itertools.count():
            if index >= len(tasks):
                break
            task = tasks[index]

            task_args = result_wrapper(task, index, tasks, args, last)

            if break_condition(task, index, tasks, args, last):
                logger.debug("'%s' breaks at task %d", name, index)
                break_at = index
                break

            if skip_condition(task, index, tasks, args, last):
                logger.debug("'%s' skips task %d", name, index)
                skipped.append(index)
                continue

            last = task(*task_args)
            store_result(results, index, last)

        pad_results(results, len(tasks))
        return TaskReturn(
            value=last, results=results, trivial=False, break_at=break_at, skipped=skipped
        )

    logger.debug("created serial task '%s' with %d task(s)", name, len(tasks))
    return decorate(serial_task, name, function_arity(tasks[0]))
