"""Defines common Value Objects used across different domain contexts."""

from typing import NewType

# === Customer Context ===
CustomerID = NewType("CustomerID", str)        # Unique identifier of a customer

# === Caching Context ===
CacheKey = NewType("CacheKey", str)            # Unique key for a cache entry

# Key under which the full customer list is cached
ALL_CUSTOMERS_KEY = CacheKey("GetAllCustomers")
