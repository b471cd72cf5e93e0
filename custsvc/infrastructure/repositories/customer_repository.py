"""Concrete implementations of the CustomerRepository interface.

- InMemoryCustomerRepository: holds a fixed list (empty by default).
- YamlCustomerRepository: reads customers from a YAML file on every call.
- CachingCustomerRepository: decorator adding CacheStorage caching in front
  of any other repository, keeping caching out of service bodies.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

import yaml

# Domain Layer Imports
from custsvc.domain.errors import RepositoryError
from custsvc.domain.interfaces.cache import CacheStorage
from custsvc.domain.interfaces.repository import CustomerRepository
from custsvc.domain.models.common import ALL_CUSTOMERS_KEY, CacheKey
from custsvc.domain.models.customer import Customer

logger = logging.getLogger(__name__)


class InMemoryCustomerRepository(CustomerRepository):
    """Repository over an in-process list of customers."""

    def __init__(self, customers: Optional[Iterable[Customer]] = None):
        self._customers: List[Customer] = list(customers or [])

    def get_customers(self) -> List[Customer]:
        logger.debug(f"Returning {len(self._customers)} in-memory customers.")
        # Copy so callers cannot mutate the repository's own list
        return list(self._customers)


class YamlCustomerRepository(CustomerRepository):
    """Repository reading a YAML list of customer mappings.

    Expected file layout::

        - customer_id: c-1
          name: Ada Lovelace
          email: ada@example.com
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def get_customers(self) -> List[Customer]:
        logger.debug(f"Reading customers from: {self.path}")
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except FileNotFoundError as e:
            raise RepositoryError(f"Customer file not found: {self.path}") from e
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to read customer file {self.path}: {e}")
            raise RepositoryError(f"Failed to read customer file {self.path}: {e}") from e

        if data is None:
            return []
        if not isinstance(data, list):
            raise RepositoryError(f"Customer file {self.path} must contain a list, got {type(data).__name__}")

        customers = []
        for index, record in enumerate(data):
            if not isinstance(record, dict):
                raise RepositoryError(f"Customer entry #{index} in {self.path} is not a mapping")
            try:
                customers.append(Customer.from_dict(record))
            except KeyError as e:
                raise RepositoryError(f"Customer entry #{index} in {self.path} is missing field {e}") from e
        logger.info(f"Loaded {len(customers)} customers from {self.path}")
        return customers


class CachingCustomerRepository(CustomerRepository):
    """Decorator that caches another repository's customer list."""

    def __init__(
        self,
        inner: CustomerRepository,
        cache_storage: CacheStorage,
        storage_key: CacheKey = ALL_CUSTOMERS_KEY,
    ):
        self.inner = inner
        self.cache_storage = cache_storage
        self.storage_key = storage_key

    def get_customers(self) -> List[Customer]:
        customers = self.cache_storage.retrieve(self.storage_key, expected_type=list)
        if customers is None:
            logger.debug(f"Cache miss for '{self.storage_key}', delegating to {type(self.inner).__name__}")
            customers = self.inner.get_customers()
            self.cache_storage.store(self.storage_key, customers)
        return customers
