"""outcomes - Rust-style Maybe and Result containers.

Public API:
    - Some / Nothing / Maybe: optional values
    - Ok / Err / Result: success-or-failure outcomes
    - UnwrapError and subclasses: raised by the unwrap family only
"""

import logging

from outcomes.lib.errors import UnwrapError, UnwrapMismatchError, UnwrapNothingError
from outcomes.lib.functions import identity, values_equal
from outcomes.lib.option import Maybe, Nothing, Some, nothing, some
from outcomes.lib.result import Err, Ok, Result, err, ok, try_result

__version__ = "0.1.0"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("outcomes").addHandler(logging.NullHandler())

__all__ = [
    "Err",
    "Maybe",
    "Nothing",
    "Ok",
    "Result",
    "Some",
    "UnwrapError",
    "UnwrapMismatchError",
    "UnwrapNothingError",
    "__version__",
    "err",
    "identity",
    "nothing",
    "ok",
    "some",
    "try_result",
    "values_equal",
]
