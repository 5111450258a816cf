"""Small helpers shared by the Maybe and Result containers."""

from typing import Any, TypeVar

T = TypeVar("T")


def identity(value: T) -> T:
    """Return the argument unchanged."""
    return value


def values_equal(left: Any, right: Any) -> bool:
    """Value equality for container payloads.

    Identity short-circuits first so payloads that are not equal to
    themselves (e.g. ``float("nan")``) still match the very same object.
    """
    return left is right or bool(left == right)
