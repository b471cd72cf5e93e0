"""custsvc: customer service with an injectable cache storage."""

__version__ = "0.1.0"
