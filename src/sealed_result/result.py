from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, NoReturn, TypeVar

from .equality import deep_equals, deep_hash
from .errors import FailurePropagated

S = TypeVar("S")
F = TypeVar("F")
NS = TypeVar("NS")
NF = TypeVar("NF")
R = TypeVar("R")

_SUCCESS_TAG: str = "success"
_FAILURE_TAG: str = "failure"


class Result(ABC, Generic[S, F]):
    """Either a success holding ``value`` or a failure holding ``error``."""

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError("Result is closed: use success() or failure()")

    @classmethod
    def success(cls, value: S) -> Result[S, F]:
        return _Success(value)

    @classmethod
    def failure(cls, error: F) -> Result[S, F]:
        return _Failure(error)

    @property
    @abstractmethod
    def is_success(self) -> bool: ...

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    @property
    @abstractmethod
    def maybe_value(self) -> S | None:
        """``None`` for a failure, and also for a success holding ``None``."""

    @property
    @abstractmethod
    def maybe_error(self) -> F | None: ...

    @abstractmethod
    def value_or_throw(self) -> S:
        """Raise an exception error as-is, anything else as ``FailurePropagated``."""

    @abstractmethod
    def when(self, *, success: Callable[[S], R], failure: Callable[[F], R]) -> R:
        """Call exactly one of ``success`` or ``failure`` and return its result."""

    def map(self, transform: Callable[[S], NS]) -> Result[NS, F]:
        return self.when(
            success=lambda value: _Success(transform(value)),
            failure=lambda error: _Failure(error),
        )

    def map_error(self, transform: Callable[[F], NF]) -> Result[S, NF]:
        return self.when(
            success=lambda value: _Success(value),
            failure=lambda error: _Failure(transform(error)),
        )

    def map_when(
        self,
        *,
        success: Callable[[S], NS],
        failure: Callable[[F], NF],
    ) -> Result[NS, NF]:
        return self.when(
            success=lambda value: _Success(success(value)),
            failure=lambda error: _Failure(failure(error)),
        )

    def map_to_result(self, transform: Callable[[S], Result[NS, F]]) -> Result[NS, F]:
        # A success may become a failure; a failure stays the same failure.
        return self.when(
            success=lambda value: transform(value),
            failure=lambda error: _Failure(error),
        )

    def map_error_to_result(self, transform: Callable[[F], Result[S, NF]]) -> Result[S, NF]:
        return self.when(
            success=lambda value: _Success(value),
            failure=lambda error: transform(error),
        )

    def map_to_result_when(
        self,
        *,
        success: Callable[[S], Result[NS, NF]],
        failure: Callable[[F], Result[NS, NF]],
    ) -> Result[NS, NF]:
        return self.when(
            success=lambda value: success(value),
            failure=lambda error: failure(error),
        )

    def flat_map(self, transform: Callable[[S], Result[NS, F]]) -> Result[NS, F]:
        return self.map_to_result(transform)

    def flat_map_error(self, transform: Callable[[F], Result[S, NF]]) -> Result[S, NF]:
        return self.map_error_to_result(transform)

    def flat_map_when(
        self,
        *,
        success: Callable[[S], Result[NS, NF]],
        failure: Callable[[F], Result[NS, NF]],
    ) -> Result[NS, NF]:
        return self.map_to_result_when(success=success, failure=failure)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class _Success(Result[S, F]):
    value: S

    @property
    def is_success(self) -> bool:
        return True

    @property
    def maybe_value(self) -> S | None:
        return self.value

    @property
    def maybe_error(self) -> F | None:
        return None

    def value_or_throw(self) -> S:
        return self.value

    def when(self, *, success: Callable[[S], R], failure: Callable[[F], R]) -> R:
        return success(self.value)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Result):
            return NotImplemented
        return isinstance(other, _Success) and deep_equals(self.value, other.value)

    def __hash__(self) -> int:
        return hash((_SUCCESS_TAG, deep_hash(self.value)))

    def __repr__(self) -> str:
        return f"Result.success(value={self.value!r})"


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class _Failure(Result[S, F]):
    error: F

    def __post_init__(self) -> None:
        if self.error is None:
            raise TypeError("a failure Result requires an error, got None")

    @property
    def is_success(self) -> bool:
        return False

    @property
    def maybe_value(self) -> S | None:
        return None

    @property
    def maybe_error(self) -> F | None:
        return self.error

    def value_or_throw(self) -> NoReturn:
        if isinstance(self.error, BaseException):
            raise self.error from self.error.__cause__
        raise FailurePropagated(self.error)

    def when(self, *, success: Callable[[S], R], failure: Callable[[F], R]) -> R:
        return failure(self.error)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Result):
            return NotImplemented
        return isinstance(other, _Failure) and deep_equals(self.error, other.error)

    def __hash__(self) -> int:
        return hash((_FAILURE_TAG, deep_hash(self.error)))

    def __repr__(self) -> str:
        return f"Result.failure(error={self.error!r})"


def success(value: S) -> Result[S, Any]:
    """Create a successful ``Result`` storing ``value``."""
    return _Success(value)


def failure(error: F) -> Result[Any, F]:
    """Create a failed ``Result`` storing ``error``; ``error`` may not be ``None``."""
    return _Failure(error)
