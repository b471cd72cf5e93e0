"""Core service for reading customers.

Depends only on the CustomerRepository and CacheStorage interfaces; the
concrete implementations are injected by the composition root (main.py) or
by tests.
"""

import logging
from typing import List

# Domain Layer Imports
from custsvc.domain.interfaces.cache import CacheStorage
from custsvc.domain.interfaces.repository import CustomerRepository
from custsvc.domain.models.common import ALL_CUSTOMERS_KEY
from custsvc.domain.models.customer import Customer

logger = logging.getLogger(__name__)


class CustomerService:
    """Serves customer lists, caching them in the injected storage."""

    storage_key = ALL_CUSTOMERS_KEY

    def __init__(
        self,
        customer_repository: CustomerRepository,
        cache_storage: CacheStorage,
    ):
        """Initializes the CustomerService with its dependencies."""
        self.customer_repository = customer_repository
        self.cache_storage = cache_storage

    def get_all_customers(self) -> List[Customer]:
        """Returns every customer, from the cache when present.

        On a miss the repository is queried and its result stored under
        'GetAllCustomers' before being returned. An empty list is cached like
        any other result. No invalidation happens if the repository changes.

        Raises:
            CacheTypeMismatchError: If something other than a list is cached
                under the key.
            RepositoryError: If the repository fails on a miss.
        """
        customers = self.cache_storage.retrieve(self.storage_key, expected_type=list)
        if customers is None:
            logger.info(f"Cache miss for '{self.storage_key}'. Fetching customers from repository.")
            customers = self.customer_repository.get_customers()
            self.cache_storage.store(self.storage_key, customers)
        else:
            logger.debug(f"Cache hit for '{self.storage_key}' ({len(customers)} customers).")
        return customers

    def invalidate(self) -> None:
        """Drops the cached customer list so the next read refetches."""
        self.cache_storage.remove(self.storage_key)
        logger.info(f"Invalidated cache entry '{self.storage_key}'.")
