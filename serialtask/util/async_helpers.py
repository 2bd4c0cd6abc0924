"""A collection of helper utilities to await plain values and future-like values alike"""

import asyncio
import concurrent.futures
import inspect
from collections.abc import Awaitable, Callable
from typing import Any

from serialtask.abc.exceptions import ThenableRejectedError


def _has_callable(value: Any, name: str) -> bool:
    return callable(getattr(value, name, None))


def is_future_like(value: Any) -> bool:
    """Checks if a value represents a result that is not available yet.

    Besides awaitables this accepts objects exposing :code:`add_done_callback`
    (e.g. :class:`concurrent.futures.Future`) and thenables exposing
    :code:`then(on_fulfilled, on_rejected)`.

    Parameters
    ----------
    value : Any
        The value to check

    Returns
    -------
    bool
        True if the value has to be awaited to obtain the actual result
    """
    if value is None or isinstance(value, (str, bytes, int, float)):
        return False
    if inspect.isclass(value):
        # methods looked up on a class are unbound
        return False
    return (
        inspect.isawaitable(value)
        or _has_callable(value, "add_done_callback")
        or _has_callable(value, "then")
    )


def adopt_thenable(thenable: Any) -> asyncio.Future:
    """Wraps a thenable into a future of the running event loop.

    The continuation callbacks may be invoked from any thread. Only the first settlement counts.
    A rejection reason that is not an exception is wrapped into a
    :class:`ThenableRejectedError`.

    Parameters
    ----------
    thenable : Any
        An object with a :code:`then(on_fulfilled, on_rejected)` method

    Returns
    -------
    asyncio.Future
        The future that settles together with the thenable
    """
    loop = asyncio.get_running_loop()
    future = loop.create_future()

    def _settle(setter, value):
        if not future.done():
            setter(value)

    def on_fulfilled(value=None):
        loop.call_soon_threadsafe(_settle, future.set_result, value)

    def on_rejected(reason=None):
        if not isinstance(reason, BaseException):
            reason = ThenableRejectedError(reason)
        loop.call_soon_threadsafe(_settle, future.set_exception, reason)

    thenable.then(on_fulfilled, on_rejected)
    return future


def adopt_done_callback(foreign: Any) -> asyncio.Future:
    """Wraps an object with :code:`add_done_callback` into a future of the running event loop.

    The object is expected to pass itself to the callback and to expose :code:`result()`.
    """
    if isinstance(foreign, concurrent.futures.Future):
        return asyncio.wrap_future(foreign)
    loop = asyncio.get_running_loop()
    future = loop.create_future()

    def _copy_state(done):
        if future.done():
            return
        try:
            future.set_result(done.result())
        except asyncio.CancelledError:
            future.cancel()
        except Exception as error:  # pylint: disable=broad-except
            future.set_exception(error)

    def on_done(done):
        loop.call_soon_threadsafe(_copy_state, done)

    foreign.add_done_callback(on_done)
    return future


def as_awaitable(value: Any) -> Awaitable:
    """Returns an awaitable for a future-like value"""
    if inspect.isawaitable(value):
        return value
    if _has_callable(value, "add_done_callback"):
        return adopt_done_callback(value)
    return adopt_thenable(value)


async def resolve(value: Any) -> Any:
    """Awaits future-like values until a plain value is reached.

    Plain values are returned as they are.
    """
    while is_future_like(value):
        value = await as_awaitable(value)
    return value


async def settle(func: Callable[..., Any], *args: Any) -> Any:
    """Calls a function and awaits its settled result.

    A function that raises right away and a function that returns a failing future-like value
    are indistinguishable for the caller: both raise when the returned coroutine is awaited.

    Parameters
    ----------
    func : Callable[..., Any]
        The synchronous or asynchronous function to call
    args : Any
        The positional arguments for :code:`func`

    Returns
    -------
    Any
        The plain result of the call
    """
    return await resolve(func(*args))
