import os

import pytest
from typer.testing import CliRunner
from unittest.mock import MagicMock

from custsvc.domain.interfaces.repository import CustomerRepository
from custsvc.domain.models.common import CustomerID
from custsvc.domain.models.customer import Customer
from custsvc.infrastructure.cli.display import ConsoleDisplay
from custsvc.infrastructure.config import settings


@pytest.fixture(scope="session")
def runner():
    """Provides a Typer CliRunner instance."""
    return CliRunner()


@pytest.fixture
def customers():
    return [
        Customer(customer_id=CustomerID("c-1"), name="Ada Lovelace", email="ada@example.com"),
        Customer(customer_id=CustomerID("c-2"), name="Alan Turing"),
    ]


@pytest.fixture
def mock_repository(customers):
    mock = MagicMock(spec=CustomerRepository)
    mock.get_customers.return_value = customers
    return mock


@pytest.fixture
def mock_console_display(mocker):
    """Mocks the ConsoleDisplay where main.py instantiates it."""
    mock = mocker.MagicMock(spec=ConsoleDisplay)
    mocker.patch('custsvc.main.ConsoleDisplay', return_value=mock)
    return mock


@pytest.fixture
def customers_yaml(tmp_path):
    path = tmp_path / "customers.yaml"
    path.write_text(
        "- customer_id: c-1\n"
        "  name: Ada Lovelace\n"
        "  email: ada@example.com\n"
        "- customer_id: c-2\n"
        "  name: Alan Turing\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keeps tests away from the user's config file, any .env and the cache directory."""
    for name in list(os.environ):
        if name.startswith(settings.ENV_PREFIX):
            monkeypatch.delenv(name)
    monkeypatch.setattr(settings, "DEFAULT_CONFIG_FILE", tmp_path / ".custsvc" / "config.yaml")
    monkeypatch.chdir(tmp_path)
    # Stops the upward .env search at tmp_path
    (tmp_path / ".env").touch()
    settings.reset_configuration()
    settings.set_config_for_testing({"cache.dir": str(tmp_path / "cache")})
    yield
    settings.clear_test_config()
    settings.reset_configuration()
