# src/featuredemo/result.py
"""
Tagged success/failure values.

A ``Result`` is either ``Success(value)`` or ``Failure(error)``. Callers
inspect it with ``isinstance`` or the ``is_success`` / ``is_failure``
flags instead of letting exceptions propagate.
"""

from dataclasses import dataclass
from typing import Any, Callable

from .exceptions import ResultError


class Result:
    """Common interface of Success and Failure."""

    is_success = False
    is_failure = False

    @staticmethod
    def catching(fn: Callable[..., Any], *args, **kwargs) -> "Result":
        """Run ``fn`` and capture its outcome.

        Any ``Exception`` becomes ``Failure(exc)`` with the exception object
        unchanged. Interpreter exits and keyboard interrupts still propagate.
        """
        try:
            return Success(fn(*args, **kwargs))
        except Exception as exc:
            return Failure(exc)

    def get(self) -> Any:
        raise NotImplementedError

    def map(self, fn: Callable[[Any], Any]) -> "Result":
        raise NotImplementedError

    def map_error(self, fn: Callable[[Any], Any]) -> "Result":
        raise NotImplementedError

    def flat_map(self, fn: Callable[[Any], "Result"]) -> "Result":
        raise NotImplementedError

    def value_or(self, default: Any) -> Any:
        raise NotImplementedError


@dataclass(frozen=True)
class Success(Result):
    value: Any

    is_success = True

    def get(self) -> Any:
        return self.value

    def map(self, fn):
        return Success(fn(self.value))

    def map_error(self, fn):
        return self

    def flat_map(self, fn):
        return fn(self.value)

    def value_or(self, default):
        return self.value


@dataclass(frozen=True)
class Failure(Result):
    error: Any

    is_failure = True

    def get(self) -> Any:
        """Re-raise the captured exception, or wrap a plain payload."""
        if isinstance(self.error, BaseException):
            raise self.error
        raise ResultError(self.error)

    def map(self, fn):
        return self

    def map_error(self, fn):
        return Failure(fn(self.error))

    def flat_map(self, fn):
        return self

    def value_or(self, default):
        return default


catching = Result.catching
