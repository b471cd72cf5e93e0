"""Error types raised across the custsvc layers.

A cache miss is not an error and has no exception here.
"""

from typing import Any


class CustsvcError(Exception):
    """Base class for all custsvc errors."""


class CacheTypeMismatchError(CustsvcError, TypeError):
    """Raised when a cached value does not match the type the caller expects."""

    def __init__(self, key: str, expected: Any, actual: Any):
        self.key = key
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Cached value for key '{key}' is {type(actual).__name__}, expected {_type_name(expected)}"
        )


class RepositoryError(CustsvcError):
    """Raised when a customer data source cannot provide its data."""


def _type_name(expected: Any) -> str:
    if isinstance(expected, tuple):
        return " | ".join(_type_name(t) for t in expected)
    return getattr(expected, "__name__", None) or str(expected)
