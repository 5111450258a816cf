"""Maybe type for optional values.

Inspired by Rust's Option<T>. A maybe is either `Some(value)` or the single
shared `Nothing`:

    match find_user(user_id):
        case Some(user):
            # handle user
        case _Nothing():
            # handle absence

`Nothing` is one object for every Maybe[T]; test for it with `is Nothing`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, Self, TypeVar

from outcomes.lib.errors import UnwrapNothingError
from outcomes.lib.functions import values_equal

if TYPE_CHECKING:
    from outcomes.lib.result import Err, Ok, Result

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Some(Generic[T]):
    """Present case containing a value. `Some(None)` is still present."""

    value: T

    def is_some(self) -> bool:
        return True

    def is_nothing(self) -> bool:
        return False

    def and_(self, other: Maybe[U]) -> Maybe[U]:
        return other

    def and_then(self, f: Callable[[T], Maybe[U]]) -> Maybe[U]:
        return f(self.value)

    def or_(self, other: Maybe[T]) -> Maybe[T]:
        return self

    def or_else(self, f: Callable[[], Maybe[T]]) -> Maybe[T]:
        return self

    def xor(self, other: Maybe[T]) -> Maybe[T]:
        """Self if `other` is Nothing, otherwise Nothing."""
        if other is Nothing:
            return self
        return Nothing

    def filter(self, predicate: Callable[[T], bool]) -> Maybe[T]:
        if predicate(self.value):
            return self
        return Nothing

    def map(self, f: Callable[[T], U]) -> Some[U]:
        return Some(f(self.value))

    def map_or(self, default: U, f: Callable[[T], U]) -> Some[U]:
        return Some(f(self.value))

    def map_or_else(self, default: Callable[[], U], f: Callable[[T], U]) -> Some[U]:
        return Some(f(self.value))

    def match(self, on_some: Callable[[T], U], on_nothing: Callable[[], U]) -> U:
        return on_some(self.value)

    def equals(self, other: Maybe[Any]) -> bool:
        match other:
            case Some(value):
                return values_equal(self.value, value)
            case _:
                return False

    def let_some(self, f: Callable[[T], object]) -> None:
        f(self.value)

    def to_list(self) -> list[T]:
        return [self.value]

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        return self.value

    def ok(self, error: E) -> Ok[T]:
        """Convert to `Ok(value)`; `error` is unused."""
        from outcomes.lib.result import Ok

        return Ok(self.value)

    def ok_or(self, error: Callable[[], E]) -> Ok[T]:
        from outcomes.lib.result import Ok

        return Ok(self.value)


class _Nothing:
    """Absent case. Stateless; only one instance ever exists."""

    __slots__ = ()

    _instance: _Nothing | None = None

    def __new__(cls) -> Self:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Nothing"

    def __reduce__(self) -> str:
        # copy, deepcopy and pickle resolve back to the module-level singleton
        return "Nothing"

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Nothing is immutable, cannot set {name!r}")

    def is_some(self) -> bool:
        return False

    def is_nothing(self) -> bool:
        return True

    def and_(self, other: Maybe[U]) -> _Nothing:
        return self

    def and_then(self, f: Callable[[Any], Maybe[U]]) -> _Nothing:
        return self

    def or_(self, other: Maybe[T]) -> Maybe[T]:
        return other

    def or_else(self, f: Callable[[], Maybe[T]]) -> Maybe[T]:
        return f()

    def xor(self, other: Maybe[T]) -> Maybe[T]:
        """`other` if it is Some, otherwise Nothing."""
        return other

    def filter(self, predicate: Callable[[Any], bool]) -> _Nothing:
        return self

    def map(self, f: Callable[[Any], U]) -> _Nothing:
        return self

    def map_or(self, default: U, f: Callable[[Any], U]) -> Some[U]:
        """Wrap `default` as `Some`, unlike `unwrap_or` which returns it bare."""
        return Some(default)

    def map_or_else(self, default: Callable[[], U], f: Callable[[Any], U]) -> Some[U]:
        return Some(default())

    def match(self, on_some: Callable[[Any], U], on_nothing: Callable[[], U]) -> U:
        return on_nothing()

    def equals(self, other: Maybe[Any]) -> bool:
        return other is self

    def let_some(self, f: Callable[[Any], object]) -> None:
        return None

    def to_list(self) -> list[Any]:
        return []

    def unwrap(self) -> Any:
        logger.debug("unwrap called on Nothing")
        raise UnwrapNothingError()

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        return f()

    def ok(self, error: E) -> Err[E]:
        """Convert to `Err(error)`."""
        from outcomes.lib.result import Err

        return Err(error)

    def ok_or(self, error: Callable[[], E]) -> Err[E]:
        """Convert to `Err(error())`, calling `error` only here."""
        from outcomes.lib.result import Err

        return Err(error())


Nothing = _Nothing()

# Type alias for Maybe
type Maybe[T] = Some[T] | _Nothing


def some(value: T) -> Some[T]:
    """Create a Some."""
    return Some(value)


def nothing() -> _Nothing:
    """Return the shared Nothing."""
    return Nothing


def from_optional(value: T | None) -> Maybe[T]:
    """`Some(value)` unless value is None."""
    if value is None:
        return Nothing
    return Some(value)


def is_some(maybe: Maybe[T]) -> bool:
    """Check if maybe holds a value."""
    return isinstance(maybe, Some)


def is_nothing(maybe: Maybe[T]) -> bool:
    """Check if maybe is Nothing."""
    return maybe is Nothing


def map_some(maybe: Maybe[T], f: Callable[[T], U]) -> Maybe[U]:
    """Apply f to the value if Some, otherwise return Nothing."""
    return maybe.map(f)


def unwrap_some(maybe: Maybe[T]) -> T:
    """Extract the value from Some, or raise UnwrapNothingError.

    Use sparingly - prefer pattern matching.
    """
    return maybe.unwrap()


def unwrap_some_or(maybe: Maybe[T], default: T) -> T:
    """Extract the value from Some, or return default if Nothing."""
    return maybe.unwrap_or(default)
