"""Customer data source adapters."""
