import json

import pytest

from infrastructure.blob_store import JsonBlobStore, MemoryBlobStore
from reservations.errors import PersistenceError
from tests.helpers import DummyLogger


def test_missing_file_reads_as_absent(tmp_path):
    store = JsonBlobStore(str(tmp_path / 'storage.json'))

    assert store.get('bookings') is None


def test_set_then_get_round_trips_and_keeps_other_keys(tmp_path):
    path = tmp_path / 'nested' / 'storage.json'
    store = JsonBlobStore(str(path))

    store.set('bookings', '[]')
    store.set('other', 'value')

    assert store.get('bookings') == '[]'
    assert json.loads(path.read_text(encoding='utf-8')) == {'bookings': '[]', 'other': 'value'}


def test_non_ascii_values_survive(tmp_path):
    store = JsonBlobStore(str(tmp_path / 'storage.json'))

    store.set('bookings', '예빈')

    assert JsonBlobStore(str(tmp_path / 'storage.json')).get('bookings') == '예빈'


def test_invalid_json_raises_persistence_error(tmp_path):
    path = tmp_path / 'storage.json'
    path.write_text('{not json', encoding='utf-8')

    with pytest.raises(PersistenceError):
        JsonBlobStore(str(path)).get('bookings')


def test_non_string_value_raises_persistence_error(tmp_path):
    path = tmp_path / 'storage.json'
    path.write_text(json.dumps({'bookings': [1, 2]}), encoding='utf-8')

    with pytest.raises(PersistenceError):
        JsonBlobStore(str(path)).get('bookings')


def test_write_replaces_unreadable_file(tmp_path):
    path = tmp_path / 'storage.json'
    path.write_text('[1, 2, 3]', encoding='utf-8')
    logger = DummyLogger()
    store = JsonBlobStore(str(path), logger=logger)

    store.set('bookings', '[]')

    assert store.get('bookings') == '[]'
    assert 'warning' in logger.levels()


def test_failed_write_leaves_no_temp_file(tmp_path, monkeypatch):
    store = JsonBlobStore(str(tmp_path / 'storage.json'))

    def fail_dump(*args, **kwargs):
        raise OSError('disk full')

    monkeypatch.setattr('infrastructure.blob_store.json.dump', fail_dump)

    with pytest.raises(PersistenceError):
        store.set('bookings', '[]')

    assert list(tmp_path.iterdir()) == []


def test_memory_store_copies_initial_values():
    initial = {'bookings': '[]'}
    store = MemoryBlobStore(initial)
    store.set('bookings', '[{}]')

    assert initial == {'bookings': '[]'}
    assert store.get('bookings') == '[{}]'
    assert store.get('missing') is None
