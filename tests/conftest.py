"""Shared pytest fixtures for outcomes tests."""

from collections.abc import Callable
from typing import Any
from unittest.mock import Mock

import pytest


@pytest.fixture
def stub() -> Callable[..., Mock]:
    """Factory for call-recording callbacks.

    Laziness is asserted on call counts, not only on returned values.
    """

    def make(return_value: Any = None) -> Mock:
        return Mock(return_value=return_value)

    return make
