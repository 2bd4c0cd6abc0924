"""This module builds asynchronous serial task functions.

Tasks, the break condition, the skip condition and the result wrapper may be plain functions,
coroutine functions or functions returning other future-like values. Every call is awaited
before the next one starts, so hooks see the same resolved values as in
:func:`serialtask.create_serial_task`.
"""

import itertools
import logging
from typing import Any, Awaitable, Callable

from serialtask.framework.task_return import TaskReturn, pad_results, store_result
from serialtask.options import normalize
from serialtask.util.async_helpers import settle
from serialtask.util.decorators import decorate, function_arity
from serialtask.util.defaults import NOT_BROKEN, UNSET

logger = logging.getLogger("SerialTaskAsync")


def create_serial_task_async(
    options: Any = UNSET, /, **kwargs
) -> Callable[..., Awaitable[TaskReturn]]:
    """Creates a coroutine function that executes the given tasks in order.

    Same evaluation order and bookkeeping as :func:`serialtask.create_serial_task`. There is
    never more than one pending call: the result wrapper is settled before the break condition
    is evaluated, the break condition before the skip condition and the skip condition before
    the task. An exception raised right away by a task or hook and a failing future-like value
    returned by it both surface as that exception when the call is awaited.

    Parameters
    ----------
    options : SerialTaskOptions | Mapping[str, Any]
        the options, see :class:`serialtask.options.SerialTaskOptions`
    kwargs :
        the options as keyword arguments instead of a mapping

    Returns
    -------
    Callable[..., Awaitable[TaskReturn]]
        the serial task coroutine function

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
        async def trivial_task(*_):
            logger.debug("'%s' has no tasks, returning trivial result", name)
            return TaskReturn.trivial_return()

        return decorate(trivial_task, name, 0)

    async def serial_task(*args) -> TaskReturn:
        last = UNSET
        results = pad_results([], len(tasks))
        break_at = NOT_BROKEN
        skipped = []

        for index in itertools.count():
            if index >= len(tasks):
                break
            task = tasks[index]

            task_args = await settle(result_wrapper, task, index, tasks, args, last)

            if await settle(break_condition, task, index, tasks, args, last):
                logger.debug("'%s' breaks at task %d", name, index)
                break_at = index
                break

            if await settle(skip_condition, task, index, tasks, args, last):
                logger.debug("'%s' skips task %d", name, index)
                skipped.append(index)
                continue

            last = await settle(task, *task_args)
            store_result(results, index, last)

        pad_results(results, len(tasks))
        return TaskReturn(
            value=last, results=results, trivial=False, break_at=break_at, skipped=skipped
        )

    logger.debug("created async serial task '%s' with %d task(s)", name, len(tasks))
    return decorate(serial_task, name, function_arity(tasks[0]))
