"""Main entry point for the custsvc application.

Sets up the Typer CLI application, performs dependency injection (Composition
Root), defines CLI commands, and delegates execution to the CommandHandler.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from typing_extensions import Annotated

# --- Core Layer ---
from custsvc.core.command_handler import CommandHandler
from custsvc.core.services.customer_service import CustomerService

# --- Domain Layer ---
from custsvc.domain.interfaces.cache import CacheStorage
from custsvc.domain.interfaces.repository import CustomerRepository

# --- Infrastructure Layer ---
from custsvc.infrastructure.cache import DiskCacheStorage, InMemoryCacheStorage, NullCacheStorage
from custsvc.infrastructure.cli.display import ConsoleDisplay
from custsvc.infrastructure.config.settings import (
    CACHE_BACKENDS,
    get_cache_backend,
    get_cache_dir,
    get_config,
    get_customers_file,
    load_configuration,
)
from custsvc.infrastructure.monitoring.logger_setup import level_from_name, setup_logging
from custsvc.infrastructure.repositories.customer_repository import (
    CachingCustomerRepository,
    InMemoryCustomerRepository,
    YamlCustomerRepository,
)

logger = logging.getLogger(__name__)


# --- Dependency Injection Container (Manual) ---

def create_cache_storage(backend: str) -> CacheStorage:
    """Instantiates the CacheStorage for a backend name."""
    if backend == "disk":
        return DiskCacheStorage(get_cache_dir())
    if backend == "none":
        return NullCacheStorage()
    if backend == "memory":
        return InMemoryCacheStorage()
    raise ValueError(f"Unknown cache backend '{backend}'. Choose one of: {', '.join(CACHE_BACKENDS)}")


def create_repository(customers_file: Optional[Path] = None) -> CustomerRepository:
    """Instantiates the customer data source."""
    path = customers_file or get_customers_file()
    if path:
        return YamlCustomerRepository(path)
    return InMemoryCustomerRepository()


def create_dependencies(
    backend: Optional[str] = None,
    decorated: bool = False,
    customers_file: Optional[Path] = None,
) -> Dict[str, Any]:
    """Creates and wires up all dependencies for the application.

    This acts as the Composition Root. With `decorated`, caching moves out of
    the service into a CachingCustomerRepository and the service itself gets a
    NullCacheStorage.
    """
    load_configuration()
    dependencies: Dict[str, Any] = {}

    dependencies['ui'] = ConsoleDisplay()
    dependencies['cache_storage'] = create_cache_storage(backend or get_cache_backend())
    dependencies['repository'] = create_repository(customers_file)

    if decorated:
        dependencies['customer_service'] = CustomerService(
            customer_repository=CachingCustomerRepository(
                inner=dependencies['repository'],
                cache_storage=dependencies['cache_storage'],
            ),
            cache_storage=NullCacheStorage(),
        )
    else:
        dependencies['customer_service'] = CustomerService(
            customer_repository=dependencies['repository'],
            cache_storage=dependencies['cache_storage'],
        )

    dependencies['command_handler'] = CommandHandler(
        customer_service=dependencies['customer_service'],
        cache_storage=dependencies['cache_storage'],
        ui=dependencies['ui'],
    )
    logger.info(
        f"Dependencies initialized: cache={type(dependencies['cache_storage']).__name__}, "
        f"repository={type(dependencies['repository']).__name__}, decorated={decorated}"
    )
    return dependencies


def close_dependencies(dependencies: Dict[str, Any]) -> None:
    """Releases resources held by the wired dependencies."""
    storage = dependencies.get('cache_storage')
    if isinstance(storage, DiskCacheStorage):
        storage.close()


# --- Typer App Definition ---
app = typer.Typer(
    name="custsvc",
    help="custsvc: list customers through a service with an injectable cache storage.",
    add_completion=False,
)

BackendOption = Annotated[
    Optional[str],
    typer.Option("--backend", "-b", help="Cache backend ('memory', 'disk', 'none'). Uses config if not set."),
]


def _validate_backend(backend: Optional[str]) -> Optional[str]:
    if backend is not None and backend.lower() not in CACHE_BACKENDS:
        raise typer.BadParameter(f"Choose one of: {', '.join(CACHE_BACKENDS)}", param_hint="--backend")
    return backend.lower() if backend else None


@app.callback()
def main_callback(
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="Logging level (e.g., DEBUG, INFO). Uses config if not set."),
    ] = None,
):
    """Configure logging before any command runs."""
    load_configuration()
    level = level_from_name(log_level or get_config('logging.level'))
    log_format = get_config('logging.format')
    kwargs = {'log_format': log_format} if log_format else {}
    setup_logging(log_level=level, log_file=get_config('logging.file'), **kwargs)


@app.command(name="list-customers")
def list_customers_command(
    backend: BackendOption = None,
    decorated: Annotated[
        bool,
        typer.Option("--decorated", help="Cache in a repository decorator instead of inside the service."),
    ] = False,
    repeat: Annotated[int, typer.Option("--repeat", "-n", min=1, help="Number of reads to perform.")] = 1,
    customers_file: Annotated[
        Optional[Path],
        typer.Option("--customers-file", "-f", exists=True, dir_okay=False, readable=True,
                     help="YAML file with the customer list."),
    ] = None,
):
    """List all customers, reporting cache hits and misses."""
    dependencies = create_dependencies(_validate_backend(backend), decorated, customers_file)
    try:
        handler: CommandHandler = dependencies['command_handler']
        ok = handler.handle_list_customers(repeat)
    finally:
        close_dependencies(dependencies)
    if not ok:
        raise typer.Exit(code=1)


@app.command(name="clear-cache")
def clear_cache_command(
    backend: BackendOption = None,
    key: Annotated[Optional[str], typer.Option("--key", "-k", help="Cache key to remove.")] = None,
    clear_all: Annotated[bool, typer.Option("--all", help="Remove every cache entry.")] = False,
):
    """Remove the cached customer list (or another key, or everything)."""
    dependencies = create_dependencies(_validate_backend(backend))
    try:
        handler: CommandHandler = dependencies['command_handler']
        ok = handler.handle_clear_cache(key=key, clear_all=clear_all)
    finally:
        close_dependencies(dependencies)
    if not ok:
        raise typer.Exit(code=1)


def cli_entry_point():
    """Function to be called by the script entry point in pyproject.toml."""
    app()


if __name__ == "__main__":
    cli_entry_point()
