"""Command Handler: Orchestrates CLI command execution.

Receives commands from the main entry point (main.py) and delegates the work
to the CustomerService and the CacheStorage, reporting results through the
UserInterface.
"""

import logging
from typing import Optional

# Core Services Imports
from custsvc.core.services.customer_service import CustomerService

# Domain Layer Imports
from custsvc.domain.interfaces.cache import CacheStorage
from custsvc.domain.interfaces.user_interface import UserInterface
from custsvc.domain.models.common import ALL_CUSTOMERS_KEY, CacheKey

logger = logging.getLogger(__name__)


class CommandHandler:
    """Handles incoming commands and delegates to appropriate services."""

    def __init__(
        self,
        customer_service: CustomerService,
        cache_storage: CacheStorage,
        ui: UserInterface,
    ):
        """Initializes the CommandHandler with required services.

        Args:
            customer_service: Service answering customer reads.
            cache_storage: The storage customer lists are cached in; used for
                hit/miss reporting and clear-cache.
            ui: Output port.
        """
        self.customer_service = customer_service
        self.cache_storage = cache_storage
        self.ui = ui

    def handle_list_customers(self, repeat: int = 1) -> bool:
        """Handles the 'list-customers' command.

        Reads the customer list `repeat` times, reporting for each read whether
        it was served from the cache, then displays the last result.

        Returns:
            True on success, False if an error was reported.
        """
        if repeat < 1:
            self.ui.display_error("Repeat count must be at least 1.")
            return False

        logger.info(f"Handling 'list-customers' command (repeat={repeat}).")
        customers = []
        try:
            for attempt in range(1, repeat + 1):
                was_cached = self.cache_storage.contains(ALL_CUSTOMERS_KEY)
                customers = self.customer_service.get_all_customers()
                source = "cache hit" if was_cached else "cache miss"
                self.ui.display_info(f"Read {attempt}: {len(customers)} customer(s) ({source}).")
        except Exception as e:
            logger.error(f"list-customers command failed: {e}", exc_info=True)
            self.ui.display_error(f"Failed to list customers: {e}")
            return False

        self.ui.display_customers(customers)
        return True

    def handle_clear_cache(self, key: Optional[str] = None, clear_all: bool = False) -> bool:
        """Handles the 'clear-cache' command.

        Removes a single key (the customer list key by default) or, with
        clear_all, every entry. Storages that do not persist between runs
        only get a warning, since a fresh process has nothing to clear.
        """
        if not self.cache_storage.persistent:
            self.ui.display_warning(
                f"{type(self.cache_storage).__name__} does not persist between runs; there is nothing to clear."
            )
            return True

        try:
            if clear_all:
                logger.info("Handling 'clear-cache' command for all keys.")
                self.cache_storage.clear()
                self.ui.display_info("Cache cleared.")
            else:
                key = key or ALL_CUSTOMERS_KEY
                logger.info(f"Handling 'clear-cache' command for key: {key}")
                self.cache_storage.remove(CacheKey(key))
                self.ui.display_info(f"Removed cache entry '{key}'.")
        except Exception as e:
            logger.error(f"Failed to clear cache: {e}", exc_info=True)
            self.ui.display_error(f"Failed to clear cache: {e}")
            return False
        return True
