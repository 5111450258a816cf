"""Error types for outcomes.

Unwrapping the wrong variant is a programming error, not a recoverable
condition. These exceptions are raised by the unwrap family only and are
never caught inside the library.
"""

from typing import Any

# =============================================================================
# Base
# =============================================================================


class UnwrapError(ValueError):
    """An unwrap accessor was called on a variant that does not hold the value."""


# =============================================================================
# Maybe Errors
# =============================================================================


class UnwrapNothingError(UnwrapError):
    """`unwrap` was called on `Nothing`."""

    def __init__(self, method: str = "unwrap") -> None:
        super().__init__(f"Called {method} on Nothing")
        self.method = method


# =============================================================================
# Result Errors
# =============================================================================


class UnwrapMismatchError(UnwrapError):
    """`unwrap` was called on `Err`, or `unwrap_err` on `Ok`.

    The payload actually held by the result is kept on `payload` and rendered
    into the message.
    """

    def __init__(self, method: str, variant: str, payload: Any) -> None:
        super().__init__(f"Called {method} on {variant}: {payload}")
        self.method = method
        self.variant = variant
        self.payload = payload
