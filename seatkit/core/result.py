"""
Result type for error handling without exceptions

A Result is either Ok(value) or Err(error). Validation code returns Results
and the HTTP handlers turn an Err into an error response.
"""

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, Optional, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Success result"""
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err(Generic[E]):
    """Error result"""
    error: E

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok[T], Err[E]]


class UnwrapError(Exception):
    """Raised when unwrapping an Err whose error is not an exception"""

    def __init__(self, error: Any):
        super().__init__(f"Called unwrap on an error result: {error!r}")
        self.error = error


def ok(value: T) -> Ok[T]:
    """Create a success result"""
    return Ok(value)


def err(error: E) -> Err[E]:
    """Create an error result"""
    return Err(error)


def is_ok(result: "Result[T, E]") -> bool:
    return isinstance(result, Ok)


def is_err(result: "Result[T, E]") -> bool:
    return isinstance(result, Err)


def unwrap(result: "Result[T, E]") -> T:
    """
    Return the success value or raise.

    Exceptions carried by an Err are re-raised as-is; any other error value
    is wrapped in UnwrapError.
    """
    if isinstance(result, Err):
        if isinstance(result.error, BaseException):
            raise result.error
        raise UnwrapError(result.error)
    return result.value


def unwrap_or(result: "Result[T, E]", default: T) -> T:
    """Return the success value or a default"""
    return result.value if isinstance(result, Ok) else default


def map(result: "Result[T, E]", fn: Callable[[T], U]) -> "Result[U, E]":
    """Transform the success value, errors pass through"""
    if isinstance(result, Ok):
        return Ok(fn(result.value))
    return result


def map_err(result: "Result[T, E]", fn: Callable[[E], F]) -> "Result[T, F]":
    """Transform the error value, successes pass through"""
    if isinstance(result, Err):
        return Err(fn(result.error))
    return result


def and_then(result: "Result[T, E]", fn: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":
    """Chain a dependent fallible operation, short-circuiting on error"""
    if isinstance(result, Ok):
        return fn(result.value)
    return result


def try_catch(
    fn: Callable[[], T],
    error_fn: Optional[Callable[[Exception], E]] = None,
) -> "Result[T, E]":
    """Run a function that might raise and capture the outcome"""
    try:
        return Ok(fn())
    except Exception as exc:
        return Err(error_fn(exc) if error_fn else exc)


async def from_awaitable(
    awaitable: Awaitable[T],
    error_fn: Optional[Callable[[Exception], E]] = None,
) -> "Result[T, E]":
    """Await something that might raise and capture the outcome"""
    try:
        return Ok(await awaitable)
    except Exception as exc:
        return Err(error_fn(exc) if error_fn else exc)
