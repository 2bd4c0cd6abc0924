"""Helpers to decorate generated task functions"""

import inspect

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def function_arity(func) -> int:
    """Number of leading positional parameters without a default value.

    :code:`*args`, :code:`**kwargs` and keyword-only parameters are not counted.
    Callables without an inspectable signature have an arity of :code:`0`.
    """
    try:
        parameters = inspect.signature(func).parameters.values()
    except (TypeError, ValueError):
        return 0
    arity = 0
    for parameter in parameters:
        if parameter.kind not in _POSITIONAL or parameter.default is not parameter.empty:
            break
        arity += 1
    return arity


def decorate(func, name: str, arity: int):
    """Attaches a display name and an arity to a generated task function.

    Both stay plain attributes and can be overwritten later.

    Parameters
    ----------
    func : Callable
        the generated task function
    name : str
        used as :code:`__name__` and :code:`__qualname__`
    arity : int
        stored as :code:`arity`

    Returns
    -------
    Callable
        the same function
    """
    func.__name__ = name
    func.__qualname__ = name
    func.arity = arity
    return func
