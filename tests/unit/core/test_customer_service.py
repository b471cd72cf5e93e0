import pytest
from unittest.mock import MagicMock

from custsvc.core.services.customer_service import CustomerService
from custsvc.domain.errors import CacheTypeMismatchError, RepositoryError
from custsvc.domain.interfaces.cache import CacheStorage
from custsvc.domain.models.common import ALL_CUSTOMERS_KEY
from custsvc.infrastructure.cache.memory_storage import InMemoryCacheStorage


@pytest.fixture
def cache_storage():
    return InMemoryCacheStorage()


@pytest.fixture
def customer_service(mock_repository, cache_storage):
    return CustomerService(customer_repository=mock_repository, cache_storage=cache_storage)


def test_first_call_fetches_and_stores_once(mock_repository, customers):
    """An empty cache leads to exactly one fetch and one store."""
    mock_cache = MagicMock(spec=CacheStorage)
    mock_cache.retrieve.return_value = None
    service = CustomerService(customer_repository=mock_repository, cache_storage=mock_cache)

    result = service.get_all_customers()

    assert result == customers
    mock_repository.get_customers.assert_called_once_with()
    mock_cache.retrieve.assert_called_once_with(ALL_CUSTOMERS_KEY, expected_type=list)
    mock_cache.store.assert_called_once_with(ALL_CUSTOMERS_KEY, customers)


def test_second_call_served_from_cache(customer_service, mock_repository, customers):
    first = customer_service.get_all_customers()
    second = customer_service.get_all_customers()

    assert first == second == customers
    mock_repository.get_customers.assert_called_once()


def test_hit_does_not_store_again(mock_repository, customers):
    mock_cache = MagicMock(spec=CacheStorage)
    mock_cache.retrieve.return_value = customers
    service = CustomerService(customer_repository=mock_repository, cache_storage=mock_cache)

    assert service.get_all_customers() is customers
    mock_repository.get_customers.assert_not_called()
    mock_cache.store.assert_not_called()


def test_remove_triggers_fresh_fetch(customer_service, cache_storage, mock_repository):
    customer_service.get_all_customers()
    cache_storage.remove(ALL_CUSTOMERS_KEY)
    customer_service.get_all_customers()

    assert mock_repository.get_customers.call_count == 2


def test_invalidate_triggers_fresh_fetch(customer_service, cache_storage, mock_repository):
    customer_service.get_all_customers()
    customer_service.invalidate()

    assert not cache_storage.contains(ALL_CUSTOMERS_KEY)
    customer_service.get_all_customers()
    assert mock_repository.get_customers.call_count == 2


def test_empty_list_is_cached(customer_service, cache_storage, mock_repository):
    """An empty result is stored as an empty list and counts as a hit afterwards."""
    mock_repository.get_customers.return_value = []

    assert customer_service.get_all_customers() == []
    assert cache_storage.contains(ALL_CUSTOMERS_KEY)
    assert cache_storage.retrieve(ALL_CUSTOMERS_KEY) == []

    assert customer_service.get_all_customers() == []
    mock_repository.get_customers.assert_called_once()


def test_stale_read_after_source_changes(customer_service, mock_repository, customers):
    customer_service.get_all_customers()
    mock_repository.get_customers.return_value = []

    assert customer_service.get_all_customers() == customers


def test_wrong_type_under_key_raises(customer_service, cache_storage, mock_repository):
    cache_storage.store(ALL_CUSTOMERS_KEY, "not a list")

    with pytest.raises(CacheTypeMismatchError):
        customer_service.get_all_customers()
    mock_repository.get_customers.assert_not_called()


def test_repository_error_propagates_and_nothing_is_cached(customer_service, cache_storage, mock_repository):
    mock_repository.get_customers.side_effect = RepositoryError("source down")

    with pytest.raises(RepositoryError, match="source down"):
        customer_service.get_all_customers()
    assert not cache_storage.contains(ALL_CUSTOMERS_KEY)
