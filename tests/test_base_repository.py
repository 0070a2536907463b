"""Unit tests for EntityRepository (whole-collection persistence)."""
import sys
import os

import pytest
from unittest.mock import patch

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'autohandel'))

from core.base_repository import EntityRepository, next_id, same_id
from core.storage import KVStore, LocalStore


class ThingRepository(EntityRepository):
    key = 'things'
    seed = [{'id': 1, 'name': 'Seed thing'}]


@pytest.fixture
def store(tmp_path):
    local = LocalStore(str(tmp_path / 'repo.db'))
    yield KVStore(fallback=local)
    local.close()


@pytest.fixture
def repo(store):
    return ThingRepository(store)


class TestNextId:

    def test_uses_current_time_for_empty_collection(self):
        with patch('core.base_repository.time.time', return_value=1700000000.123):
            assert next_id([]) == 1700000000123

    def test_bumps_past_existing_ids_created_in_same_millisecond(self):
        with patch('core.base_repository.time.time', return_value=1700000000.0):
            assert next_id([{'id': 1700000000000}]) == 1700000000001

    def test_ignores_non_integer_ids(self):
        with patch('core.base_repository.time.time', return_value=5.0):
            assert next_id([{'id': 'abc'}, {}]) == 5000


class TestSameId:

    def test_string_and_int_compare_equal(self):
        assert same_id(3, '3')

    def test_none_never_matches(self):
        assert not same_id(None, None)
        assert not same_id(1, None)


class TestLoadAll:

    def test_empty_store_yields_seed(self, repo):
        assert repo.load_all() == [{'id': 1, 'name': 'Seed thing'}]

    def test_seed_is_a_copy(self, repo):
        repo.load_all()[0]['name'] = 'Mutated'
        assert ThingRepository.seed[0]['name'] == 'Seed thing'

    def test_stored_empty_list_yields_seed(self, repo, store):
        store.set('things', [])
        assert repo.load_all() == ThingRepository.seed

    def test_stored_records_returned(self, repo, store):
        store.set('things', [{'id': 9, 'name': 'Stored'}])
        assert repo.load_all() == [{'id': 9, 'name': 'Stored'}]


class TestCreate:

    def test_appends_with_fresh_id(self, repo, store):
        created = repo.create({'name': 'New'})

        saved = store.get('things')
        assert len(saved) == 2
        assert saved[0] == {'id': 1, 'name': 'Seed thing'}
        assert saved[1] == created
        assert created['id'] != 1

    def test_ids_unique_within_same_millisecond(self, repo):
        with patch('core.base_repository.time.time', return_value=1700000000.0):
            first = repo.create({'name': 'a'})
            second = repo.create({'name': 'b'})
        assert first['id'] != second['id']

    def test_does_not_mutate_input(self, repo):
        data = {'name': 'Input'}
        repo.create(data)
        assert 'id' not in data


class TestUpdate:

    def test_applies_mutator_and_saves(self, repo, store):
        store.set('things', [{'id': 1, 'name': 'a'}, {'id': 2, 'name': 'b'}])

        result = repo.update('2', lambda t: t.update(name='B'))

        assert result == {'id': 2, 'name': 'B'}
        assert store.get('things') == [{'id': 1, 'name': 'a'}, {'id': 2, 'name': 'B'}]

    def test_absent_id_writes_nothing(self, repo, store):
        store.set('things', [{'id': 1, 'name': 'a'}])
        before = store.fallback.get_item('things')

        assert repo.update(42, lambda t: t.update(name='x')) is None
        assert store.fallback.get_item('things') == before


class TestRemove:

    def test_removes_matching_record(self, repo, store):
        store.set('things', [{'id': 1}, {'id': 2}])

        assert repo.remove(1) is True
        assert store.get('things') == [{'id': 2}]

    def test_absent_id_writes_nothing(self, repo, store):
        store.set('things', [{'id': 1}])
        before = store.fallback.get_item('things')

        assert repo.remove(99) is False
        assert store.fallback.get_item('things') == before

    def test_get_by_id(self, repo):
        assert repo.get_by_id('1')['name'] == 'Seed thing'
        assert repo.get_by_id(5) is None
