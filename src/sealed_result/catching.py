from __future__ import annotations

import inspect
import logging
from typing import Any, Awaitable, Callable, TypeVar

from .result import Result, failure, success

logger = logging.getLogger(__name__)

T = TypeVar("T")

ErrorType = type[BaseException] | tuple[type[BaseException], ...]


def _check_error_type(error_type: ErrorType) -> None:
    types: tuple[object, ...] = error_type if isinstance(error_type, tuple) else (error_type,)
    for candidate in types:
        if not (isinstance(candidate, type) and issubclass(candidate, BaseException)):
            raise TypeError(
                f"error_type must be an exception class or a tuple of them, got {candidate!r}"
            )


def _describe(error_type: ErrorType) -> str:
    if isinstance(error_type, tuple):
        return ", ".join(t.__name__ for t in error_type)
    return error_type.__name__


def catching(closure: Callable[[], T], error_type: ErrorType = Exception) -> Result[T, Any]:
    """Call ``closure`` once; exceptions matching ``error_type`` become a failure.

    Anything else ``closure`` raises propagates. Awaitables are rejected,
    use ``catching_async`` for those.
    """
    _check_error_type(error_type)
    try:
        value: T = closure()
    except error_type as exc:
        logger.debug("catching %s converted to failure: %r", _describe(error_type), exc)
        return failure(exc)
    if inspect.isawaitable(value):
        if inspect.iscoroutine(value):
            value.close()
        raise TypeError("closure returned an awaitable; use catching_async instead")
    return success(value)


async def catching_async(
    closure: Callable[[], Awaitable[T] | T],
    error_type: ErrorType = Exception,
) -> Result[T, Any]:
    _check_error_type(error_type)
    try:
        outcome: Awaitable[T] | T = closure()
        if inspect.isawaitable(outcome):
            value: T = await outcome
        else:
            value = outcome
    except error_type as exc:
        logger.debug("catching_async %s converted to failure: %r", _describe(error_type), exc)
        return failure(exc)
    return success(value)
