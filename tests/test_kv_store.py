"""Unit tests for the storage abstraction.

Tests:
- LocalStore: prefixed keys, JSON round-trip, delete
- KVStore: primary delegation, silent fallback on primary failure
- PostgresKVBackend: SQL issued through the connection pool helpers
"""
import sys
import os

import pytest
from unittest.mock import patch, MagicMock

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'autohandel'))

from core.storage import KVStore, LocalStore, PostgresKVBackend

_B = 'core.storage.backends'


@pytest.fixture
def local_store(tmp_path):
    store = LocalStore(str(tmp_path / 'local.db'))
    yield store
    store.close()


def _failing_backend():
    backend = MagicMock()
    backend.get.side_effect = RuntimeError('kv unavailable')
    backend.set.side_effect = RuntimeError('kv unavailable')
    backend.delete.side_effect = RuntimeError('kv unavailable')
    return backend


class TestLocalStore:

    def test_round_trip(self, local_store):
        local_store.set('wagens', [{'id': 1, 'merk': 'BMW'}])
        assert local_store.get('wagens') == [{'id': 1, 'merk': 'BMW'}]

    def test_missing_key_is_none(self, local_store):
        assert local_store.get('nothing') is None

    def test_values_stored_as_json_under_prefixed_key(self, local_store):
        local_store.set('currentUser', {'username': 'jan'})
        assert local_store.get_item('currentUser') == '{"username": "jan"}'
        row = local_store._conn.execute('SELECT key FROM local_storage').fetchone()
        assert row[0] == 'kv_currentUser'

    def test_delete(self, local_store):
        local_store.set('meldingen', [])
        local_store.delete('meldingen')
        assert local_store.get('meldingen') is None

    def test_persists_across_instances(self, tmp_path):
        path = str(tmp_path / 'persist.db')
        first = LocalStore(path)
        first.set('kosten', [{'bedrag': 320}])
        first.close()

        second = LocalStore(path)
        assert second.get('kosten') == [{'bedrag': 320}]
        second.close()


class TestKVStore:

    def test_without_primary_uses_local_store(self, local_store):
        store = KVStore(fallback=local_store)
        store.set('wagens', [{'id': 1}])
        assert store.get('wagens') == [{'id': 1}]

    def test_primary_used_when_present(self, local_store):
        primary = MagicMock()
        primary.get.return_value = {'username': 'admin'}
        store = KVStore(fallback=local_store, primary=primary)

        store.set('currentUser', {'username': 'admin'})
        assert store.get('currentUser') == {'username': 'admin'}
        store.delete('currentUser')

        primary.set.assert_called_once_with('currentUser', {'username': 'admin'})
        primary.get.assert_called_once_with('currentUser')
        primary.delete.assert_called_once_with('currentUser')
        assert local_store.get('currentUser') is None

    def test_round_trip_through_primary_failure(self, local_store):
        """A value written while the primary fails is read back through the fallback."""
        store = KVStore(fallback=local_store, primary=_failing_backend())

        store.set('wagens', [{'id': 7, 'merk': 'Audi'}])
        assert store.get('wagens') == [{'id': 7, 'merk': 'Audi'}]

    def test_get_falls_back_when_primary_get_raises(self, local_store):
        local_store.set('medewerkers', [{'id': 1}])
        primary = MagicMock()
        primary.get.side_effect = ConnectionError('down')
        store = KVStore(fallback=local_store, primary=primary)

        assert store.get('medewerkers') == [{'id': 1}]

    def test_delete_falls_back(self, local_store):
        local_store.set('currentUser', {'username': 'x'})
        store = KVStore(fallback=local_store, primary=_failing_backend())

        store.delete('currentUser')
        assert local_store.get('currentUser') is None

    def test_both_backends_failing_reads_as_none(self):
        store = KVStore(fallback=_failing_backend(), primary=_failing_backend())

        assert store.get('wagens') is None
        store.set('wagens', [])  # must not raise
        store.delete('wagens')   # must not raise


class TestPostgresKVBackend:

    @patch(f'{_B}.release_db')
    @patch(f'{_B}.get_cursor')
    @patch(f'{_B}.get_db')
    def test_get_returns_value(self, mock_get_db, mock_get_cursor, mock_release):
        mock_conn, mock_cursor = MagicMock(), MagicMock()
        mock_get_db.return_value = mock_conn
        mock_get_cursor.return_value = mock_cursor
        mock_cursor.fetchone.return_value = {'value': [{'id': 1}]}

        assert PostgresKVBackend().get('wagens') == [{'id': 1}]
        assert mock_cursor.execute.call_args[0][1] == ('wagens',)
        mock_release.assert_called_once_with(mock_conn)

    @patch(f'{_B}.release_db')
    @patch(f'{_B}.get_cursor')
    @patch(f'{_B}.get_db')
    def test_get_missing_returns_none(self, mock_get_db, mock_get_cursor, mock_release):
        mock_get_db.return_value = MagicMock()
        mock_cursor = MagicMock()
        mock_get_cursor.return_value = mock_cursor
        mock_cursor.fetchone.return_value = None

        assert PostgresKVBackend().get('wagens') is None

    @patch(f'{_B}.release_db')
    @patch(f'{_B}.get_cursor')
    @patch(f'{_B}.get_db')
    def test_set_upserts_and_commits(self, mock_get_db, mock_get_cursor, mock_release):
        mock_conn, mock_cursor = MagicMock(), MagicMock()
        mock_get_db.return_value = mock_conn
        mock_get_cursor.return_value = mock_cursor

        PostgresKVBackend().set('kosten', [{'bedrag': 10}])

        sql = mock_cursor.execute.call_args[0][0]
        assert 'ON CONFLICT (key)' in sql
        mock_conn.commit.assert_called_once()
        mock_release.assert_called_once_with(mock_conn)

    @patch(f'{_B}.release_db')
    @patch(f'{_B}.get_cursor')
    @patch(f'{_B}.get_db')
    def test_set_rolls_back_and_raises(self, mock_get_db, mock_get_cursor, mock_release):
        mock_conn, mock_cursor = MagicMock(), MagicMock()
        mock_get_db.return_value = mock_conn
        mock_get_cursor.return_value = mock_cursor
        mock_cursor.execute.side_effect = RuntimeError('boom')

        with pytest.raises(RuntimeError):
            PostgresKVBackend().set('kosten', [])
        mock_conn.rollback.assert_called_once()
        mock_release.assert_called_once_with(mock_conn)
