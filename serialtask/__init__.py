"""serialtask runs a sequence of functions in order, passing each result on to the next one."""

from serialtask.framework.serial_task import create_serial_task
from serialtask.framework.serial_task_async import create_serial_task_async
from serialtask.framework.task_return import TaskReturn
from serialtask.options import SerialTaskOptions
from serialtask.options_error import InvalidConfigurationError
from serialtask.util.defaults import UNSET

__all__ = [
    "create_serial_task",
    "create_serial_task_async",
    "InvalidConfigurationError",
    "SerialTaskOptions",
    "TaskReturn",
    "UNSET",
]
