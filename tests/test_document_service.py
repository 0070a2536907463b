"""Tests for document metadata uploads and the documents view."""
import sys
import os
from datetime import date

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'autohandel'))

from core.activity import ActivityRepository
from core.auth.models import Session
from core.storage import KVStore, LocalStore
from documenten.repositories import DocumentRepository
from documenten.services import DocumentService, format_file_size


@pytest.fixture
def store(tmp_path):
    local = LocalStore(str(tmp_path / 'documenten.db'))
    yield KVStore(fallback=local)
    local.close()


@pytest.fixture
def service(store):
    return DocumentService(DocumentRepository(store), ActivityRepository(store))


FILE_INFO = {'name': 'keuring.pdf', 'size': 2516582, 'mimetype': 'application/pdf'}
FORM = {'naam': 'Keuringsattest Audi A4', 'type': 'keuring', 'categorie': 'wagen',
        'gerelateerd_aan': 'Audi A4 (AUD001)'}


@pytest.mark.parametrize('size,expected', [
    (2516582, '2.4 MB'),
    (0, '0.0 MB'),
    (1048576, '1.0 MB'),
])
def test_format_file_size(size, expected):
    assert format_file_size(size) == expected


class TestUpload:

    def test_records_metadata(self, service):
        result = service.upload(dict(FORM, ocr_verwerken='on'), FILE_INFO, Session('marie', 'administratie', ''))

        assert result.success
        document = result.data
        assert document['status'] == 'compleet'
        assert document['upload_datum'] == date.today().isoformat()
        assert document['bestandsnaam'] == 'keuring.pdf'
        assert document['bestandsgrootte'] == '2.4 MB'
        assert document['bestandstype'] == 'application/pdf'
        assert document['ocr_verwerkt'] is True
        assert document['geupload_door'] == 'marie'

    def test_no_file_rejected(self, service, store):
        result = service.upload(dict(FORM), None)

        assert not result.success
        assert result.error == 'Selecteer een bestand om te uploaden'
        assert store.get('documenten') is None

    def test_missing_name_rejected(self, service):
        assert not service.upload(dict(FORM, naam=''), FILE_INFO).success

    def test_size_given_as_text(self, service):
        result = service.upload(dict(FORM), dict(FILE_INFO, size='5242880'))
        assert result.success
        assert result.data['bestandsgrootte'] == '5.0 MB'

    @pytest.mark.parametrize('size', ['groot', -5, [1]])
    def test_invalid_size_rejected(self, service, store, size):
        result = service.upload(dict(FORM), dict(FILE_INFO, size=size))

        assert not result.success
        assert result.error == 'Ongeldige bestandsgrootte'
        assert store.get('documenten') is None

    def test_unknown_category_rejected(self, service):
        assert not service.upload(dict(FORM, categorie='diversen'), FILE_INFO).success

    def test_activity_mentions_related_item(self, service, store):
        service.upload(dict(FORM), FILE_INFO)
        assert store.get('recent_activities')[0]['description'] == 'Document geüpload voor Audi A4 (AUD001)'


class TestEdit:

    def test_update_status(self, service):
        assert service.update(3, {'status': 'compleet'}).success
        assert service.get(3)['status'] == 'compleet'

    def test_invalid_status(self, service):
        assert not service.update(3, {'status': 'kwijt'}).success

    def test_delete_unknown_writes_nothing(self, service, store):
        assert service.delete(404).success
        assert store.get('documenten') is None


def test_build_view_statistics(service):
    view = service.build_view()
    assert len(view['documenten']) == 3
    assert view['statistieken'] == {'totaal': 3, 'ontbrekend': 1, 'verlopen': 1, 'ocr_verwerkt': 2}


def test_build_view_filters(service):
    view = service.build_view(categorie='wagen', status='ontbreekt')
    assert [d['id'] for d in view['documenten']] == [3]
    assert view['statistieken']['totaal'] == 3
