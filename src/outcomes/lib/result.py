"""Result type for monadic error handling.

Inspired by Rust's Result<T, E>. A result is either `Ok(value)` or
`Err(error)`; both variants expose the same combinator methods, so a chain
reads the same whichever branch it is on:

    parse(raw).map(normalize).and_then(validate).unwrap_or(fallback)

Use pattern matching to handle results:

    match some_operation():
        case Ok(value):
            # handle success
        case Err(error):
            # handle error
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from outcomes.lib.errors import UnwrapMismatchError
from outcomes.lib.functions import values_equal

if TYPE_CHECKING:
    from outcomes.lib.option import Maybe

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success case containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def and_(self, other: Result[U, E]) -> Result[U, E]:
        """Return `other`; only an `Err` short-circuits."""
        return other

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain a fallible step on the value. Also known as `flat_map`."""
        return f(self.value)

    def or_(self, other: Result[T, E]) -> Result[T, E]:
        return self

    def or_else(self, f: Callable[[], Result[T, E]]) -> Result[T, E]:
        return self

    def map(self, f: Callable[[T], U]) -> Ok[U]:
        return Ok(f(self.value))

    def map_err(self, f: Callable[[Any], F]) -> Ok[T]:
        return self

    def map_or(self, default: U, f: Callable[[T], U]) -> Ok[U]:
        return Ok(f(self.value))

    def map_or_else(self, default: Callable[[], U], f: Callable[[T], U]) -> Ok[U]:
        return Ok(f(self.value))

    def map_err_or(self, default: F, f: Callable[[Any], F]) -> Err[F]:
        """Replace the success with `Err(default)`."""
        return Err(default)

    def map_err_or_else(self, default: Callable[[], F], f: Callable[[Any], F]) -> Err[F]:
        return Err(default())

    def match(self, on_ok: Callable[[T], U], on_err: Callable[[Any], U]) -> U:
        return on_ok(self.value)

    def let_ok(self, f: Callable[[T], object]) -> None:
        f(self.value)

    def let_err(self, f: Callable[[Any], object]) -> None:
        return None

    def equals(self, other: Result[Any, Any]) -> bool:
        match other:
            case Ok(value):
                return values_equal(self.value, value)
            case _:
                return False

    def to_list(self) -> list[T]:
        return [self.value]

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> Any:
        logger.debug("unwrap_err called on Ok(%r)", self.value)
        raise UnwrapMismatchError("unwrap_err", "Ok", self.value)

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        return self.value

    def unwrap_err_or(self, default: E) -> E:
        return default

    def unwrap_err_or_else(self, f: Callable[[], E]) -> E:
        return f()

    def ok(self) -> Maybe[T]:
        """Convert to `Some(value)`."""
        from outcomes.lib.option import Some

        return Some(self.value)

    def err(self) -> Maybe[Any]:
        """Convert to `Nothing`, discarding the value."""
        from outcomes.lib.option import Nothing

        return Nothing


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error case containing an error."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def and_(self, other: Result[U, E]) -> Err[E]:
        """Return this very `Err`; `other` is ignored."""
        return self

    def and_then(self, f: Callable[[Any], Result[U, E]]) -> Err[E]:
        return self

    def or_(self, other: Result[T, E]) -> Result[T, E]:
        return other

    def or_else(self, f: Callable[[], Result[T, E]]) -> Result[T, E]:
        return f()

    def map(self, f: Callable[[Any], U]) -> Err[E]:
        return self

    def map_err(self, f: Callable[[E], F]) -> Err[F]:
        return Err(f(self.error))

    def map_or(self, default: U, f: Callable[[Any], U]) -> Ok[U]:
        """Replace the failure with `Ok(default)`."""
        return Ok(default)

    def map_or_else(self, default: Callable[[], U], f: Callable[[Any], U]) -> Ok[U]:
        return Ok(default())

    def map_err_or(self, default: F, f: Callable[[E], F]) -> Err[F]:
        return Err(f(self.error))

    def map_err_or_else(self, default: Callable[[], F], f: Callable[[E], F]) -> Err[F]:
        return Err(f(self.error))

    def match(self, on_ok: Callable[[Any], U], on_err: Callable[[E], U]) -> U:
        return on_err(self.error)

    def let_ok(self, f: Callable[[Any], object]) -> None:
        return None

    def let_err(self, f: Callable[[E], object]) -> None:
        f(self.error)

    def equals(self, other: Result[Any, Any]) -> bool:
        match other:
            case Err(error):
                return values_equal(self.error, error)
            case _:
                return False

    def to_list(self) -> list[E]:
        return [self.error]

    def unwrap(self) -> Any:
        logger.debug("unwrap called on Err(%r)", self.error)
        raise UnwrapMismatchError("unwrap", "Err", self.error)

    def unwrap_err(self) -> E:
        return self.error

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        return f()

    def unwrap_err_or(self, default: E) -> E:
        return self.error

    def unwrap_err_or_else(self, f: Callable[[], E]) -> E:
        return self.error

    def ok(self) -> Maybe[Any]:
        """Convert to `Nothing`, discarding the error."""
        from outcomes.lib.option import Nothing

        return Nothing

    def err(self) -> Maybe[E]:
        """Convert to `Some(error)`."""
        from outcomes.lib.option import Some

        return Some(self.error)


# Type alias for Result
type Result[T, E] = Ok[T] | Err[E]


def ok(value: T) -> Ok[T]:
    """Create an Ok result."""
    return Ok(value)


def err(error: E) -> Err[E]:
    """Create an Err result."""
    return Err(error)


def from_optional(value: T | None, error: E) -> Result[T, E]:
    """`Ok(value)` unless value is None, in which case `Err(error)`."""
    if value is None:
        return Err(error)
    return Ok(value)


def try_result(
    f: Callable[[], T], *exceptions: type[BaseException]
) -> Result[T, BaseException]:
    """Call f, capturing the listed exception types (default: Exception) as Err.

    Anything not listed propagates unchanged.
    """
    catch = exceptions or (Exception,)
    try:
        return Ok(f())
    except catch as e:
        logger.debug("try_result captured %s: %s", type(e).__name__, e)
        return Err(e)


def is_ok(result: Result[T, E]) -> bool:
    """Check if result is Ok."""
    return isinstance(result, Ok)


def is_err(result: Result[T, E]) -> bool:
    """Check if result is Err."""
    return isinstance(result, Err)


def map_ok(result: Result[T, E], f: Callable[[T], U]) -> Result[U, E]:
    """Apply f to the value if Ok, otherwise return the Err unchanged."""
    return result.map(f)


def map_err(result: Result[T, E], f: Callable[[E], U]) -> Result[T, U]:
    """Apply f to the error if Err, otherwise return the Ok unchanged."""
    return result.map_err(f)


def flat_map(result: Result[T, E], f: Callable[[T], Result[U, E]]) -> Result[U, E]:
    """Apply f to the value if Ok (f returns Result), otherwise return Err.

    Also known as `and_then` or `bind`.
    """
    return result.and_then(f)


def unwrap(result: Result[T, E]) -> T:
    """Extract the value from Ok, or raise UnwrapMismatchError if Err.

    Use sparingly - prefer pattern matching.
    """
    return result.unwrap()


def unwrap_or(result: Result[T, E], default: T) -> T:
    """Extract the value from Ok, or return default if Err."""
    return result.unwrap_or(default)


def unwrap_err(result: Result[T, E]) -> E:
    """Extract the error from Err, or raise UnwrapMismatchError if Ok.

    Use sparingly - prefer pattern matching.
    """
    return result.unwrap_err()
