import threading
from typing import Any, List, Optional

import pytest

from custsvc.domain.errors import CacheTypeMismatchError
from custsvc.domain.models.customer import Customer
from custsvc.infrastructure.cache.memory_storage import InMemoryCacheStorage


@pytest.fixture
def storage():
    return InMemoryCacheStorage()


def test_retrieve_missing_key_returns_none(storage):
    assert storage.retrieve("missing") is None
    assert storage.retrieve("missing", expected_type=list) is None


def test_store_overwrites_existing_entry(storage):
    storage.store("k", [1])
    storage.store("k", [2, 3])
    assert storage.retrieve("k") == [2, 3]
    assert len(storage) == 1


def test_retrieve_returns_stored_object(storage, customers):
    storage.store("k", customers)
    assert storage.retrieve("k", expected_type=list) is customers


def test_retrieve_checks_generic_origin(storage, customers):
    storage.store("k", customers)
    assert storage.retrieve("k", expected_type=List[Customer]) is customers


def test_retrieve_type_mismatch_raises(storage):
    storage.store("k", {"a": 1})
    with pytest.raises(CacheTypeMismatchError) as excinfo:
        storage.retrieve("k", expected_type=list)
    assert excinfo.value.key == "k"
    assert "dict" in str(excinfo.value)
    assert isinstance(excinfo.value, TypeError)


def test_retrieve_accepts_tuple_of_types(storage):
    storage.store("k", (1, 2))
    assert storage.retrieve("k", expected_type=(list, tuple)) == (1, 2)


def test_remove_absent_key_is_noop(storage):
    storage.remove("missing")
    storage.store("k", 1)
    storage.remove("k")
    storage.remove("k")
    assert not storage.contains("k")


def test_clear_drops_everything(storage):
    storage.store("a", 1)
    storage.store("b", 2)
    storage.clear()
    assert len(storage) == 0
    assert storage.retrieve("a") is None


def test_concurrent_stores_are_all_kept(storage):
    def worker(offset):
        for i in range(100):
            storage.store(f"{offset}-{i}", i)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(storage) == 800


def test_retrieve_accepts_union_types(storage):
    storage.store("k", [1])
    assert storage.retrieve("k", expected_type=Optional[List[int]]) == [1]
    with pytest.raises(CacheTypeMismatchError):
        storage.retrieve("k", expected_type=Optional[dict])


def test_retrieve_with_any_skips_the_check(storage):
    storage.store("k", {"a": 1})
    assert storage.retrieve("k", expected_type=Any) == {"a": 1}
    assert storage.retrieve("k", expected_type=Optional[Any]) == {"a": 1}
    assert storage.retrieve("k", expected_type=(list, Any)) == {"a": 1}
