"""This module contains the result record of one call of a generated task function."""

from typing import Any, List

from attrs import define, field, validators

from serialtask.util.defaults import NOT_BROKEN, UNSET


@define(kw_only=True)
class TaskReturn:
    """Result object returned by every call of a generated task function.

    Parameters
    ----------

    value : Any
        The result of the last task that ran
    results : list
        The results of all tasks in the order of the task sequence
    trivial : bool
        True if the task sequence was empty
    break_at : int
        The index where the loop was stopped by the break condition
    skipped : list[int]
        The indices of the skipped tasks

    Returns
    -------
    TaskReturn
        The result object
    """

    __match_args__ = ("value", "break_at", "skipped")

    value: Any = field(default=UNSET)
    """ The result of the last task that ran, :data:`UNSET` if no task ran """
    results: List[Any] = field(validator=validators.instance_of(list), factory=list)
    """ Same order as the tasks. Skipped tasks and tasks that were never reached
    keep :data:`UNSET` in their slot """
    trivial: bool = field(validator=validators.instance_of(bool), default=False)
    """ Means the task sequence was empty """
    break_at: int = field(validator=validators.instance_of(int), default=NOT_BROKEN)
    """ :code:`-1` if the loop was not stopped, otherwise the index of the task that was
    about to run when the break condition was met """
    skipped: List[int] = field(
        validator=validators.deep_iterable(
            member_validator=validators.instance_of(int),
            iterable_validator=validators.instance_of(list),
        ),
        factory=list,
    )
    """ Indices of the skipped tasks in ascending order """

    @classmethod
    def trivial_return(cls) -> "TaskReturn":
        """Returns the record for an empty task sequence"""
        return cls(trivial=True)

    @property
    def broken(self) -> bool:
        """True if the loop was stopped by the break condition"""
        return self.break_at != NOT_BROKEN

    def has_result(self, index: int) -> bool:
        """Checks if the task at :code:`index` ran and stored a result"""
        return 0 <= index < len(self.results) and self.results[index] is not UNSET


def store_result(results: list, index: int, value: Any) -> None:
    """Stores a task result, growing the list if tasks were appended during the call"""
    pad_results(results, index + 1)
    results[index] = value


def pad_results(results: list, length: int) -> list:
    """Grows the list with :data:`UNSET` slots up to :code:`length`"""
    if len(results) < length:
        results.extend([UNSET] * (length - len(results)))
    return results
