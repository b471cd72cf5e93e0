"""Interface for cache storage.

Defines the contract for storing, retrieving and removing cached values by
key. Services receive a CacheStorage through their constructor instead of
reaching for a global cache, so the backing store (in-memory dict, disk,
external server) can be swapped without touching service code.
"""

import abc
import types
import typing
from typing import Any, Optional

from custsvc.domain.errors import CacheTypeMismatchError
from custsvc.domain.models.common import CacheKey

ExpectedType = Any  # a class, a tuple of classes, or a parameterised generic like List[Customer]


class CacheStorage(abc.ABC):
    """Abstract Base Class for key/value cache storage."""

    # True when entries outlive the process that stored them
    persistent: bool = False

    @abc.abstractmethod
    def store(self, key: CacheKey, value: Any) -> None:
        """Associates value with key, overwriting any existing entry.

        Args:
            key: The cache key to store the value under.
            value: The value to store.
        """
        pass

    @abc.abstractmethod
    def retrieve(self, key: CacheKey, expected_type: Optional[ExpectedType] = None) -> Optional[Any]:
        """Retrieves the value stored under key.

        A miss is a normal outcome and never raises.

        Args:
            key: The cache key to look up.
            expected_type: Optional type the stored value must be an instance of.
                ``typing.Any`` accepts every value.
                Parameterised generics are checked against their origin
                (``List[Customer]`` checks ``list``).

        Returns:
            The stored value, or None if the key is absent.

        Raises:
            CacheTypeMismatchError: If a value is present but is not an
                instance of expected_type.
        """
        pass

    @abc.abstractmethod
    def remove(self, key: CacheKey) -> None:
        """Deletes the entry for key if present; no-op if absent."""
        pass

    @abc.abstractmethod
    def contains(self, key: CacheKey) -> bool:
        """Returns True if an entry exists for key."""
        pass

    @abc.abstractmethod
    def clear(self) -> None:
        """Removes every entry from the storage."""
        pass


def check_type(key: CacheKey, value: Any, expected_type: Optional[ExpectedType]) -> Any:
    """Validates a retrieved value against the caller's expected type.

    Shared by CacheStorage implementations. None (a miss) always passes.
    """
    if value is None or expected_type is None:
        return value
    runtime_type = _runtime_type(expected_type)
    if not isinstance(value, runtime_type):
        raise CacheTypeMismatchError(str(key), expected_type, value)
    return value


def _runtime_type(expected_type: ExpectedType) -> Any:
    if expected_type is Any:
        return object
    if isinstance(expected_type, tuple):
        return tuple(_runtime_type(t) for t in expected_type)
    origin = typing.get_origin(expected_type)
    if origin is not None and origin in (typing.Union, getattr(types, "UnionType", typing.Union)):
        return tuple(_runtime_type(t) for t in typing.get_args(expected_type))
    return origin or expected_type
