"""API tests through the Flask test client.

Each test gets its own local store, so sessions and records never leak
between tests.
"""
import sys
import os
import io

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'autohandel'))
os.environ.setdefault('TESTING', '1')
os.environ.pop('DATABASE_URL', None)

from config import reset_config
reset_config()

from app import app
from core.storage import KVStore, LocalStore, configure_store


@pytest.fixture
def store(tmp_path):
    local = LocalStore(str(tmp_path / 'api.db'))
    kv = KVStore(fallback=local)
    configure_store(kv)
    yield kv
    configure_store(None)
    local.close()


@pytest.fixture
def client(store):
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


def login(client, role='admin', username='tester'):
    return client.post('/api/login', json={'username': username, 'password': 'x', 'role': role})


class TestAuth:

    def test_login(self, client, store):
        resp = login(client, 'verkoper', 'jan')

        assert resp.status_code == 200
        data = resp.get_json()
        assert data['success'] is True
        assert data['message'] == 'Succesvol ingelogd'
        assert store.get('currentUser')['role'] == 'verkoper'

    def test_login_missing_field(self, client):
        resp = client.post('/api/login', json={'username': 'jan', 'role': 'admin'})
        assert resp.status_code == 400
        assert resp.get_json()['error'] == 'Vul alle velden in'

    def test_requires_login(self, client):
        resp = client.get('/api/wagens')
        assert resp.status_code == 401
        assert resp.get_json()['error'] == 'Authentication required'

    def test_session_and_logout(self, client, store):
        login(client, 'administratie', 'marie')
        assert client.get('/api/session').get_json()['session']['username'] == 'marie'

        client.post('/api/logout')

        assert store.get('currentUser') is None
        assert client.get('/api/session').get_json()['session'] is None
        assert client.get('/api/navigation').status_code == 401

    def test_navigation_follows_role(self, client):
        login(client, 'personeel')
        modules = client.get('/api/navigation').get_json()['modules']
        assert [m['module_key'] for m in modules] == ['dashboard', 'personeel']


class TestPages:

    def test_dashboard_page(self, client):
        login(client, 'verkoper', 'jan')
        resp = client.get('/api/pages/dashboard')

        assert resp.status_code == 200
        view = resp.get_json()['view']
        assert view['welkom'] == 'jan'
        assert view['alerts']['betalingen'] == 15750

    def test_denied_page(self, client):
        login(client, 'personeel')
        resp = client.get('/api/pages/financien')

        assert resp.status_code == 403
        assert resp.get_json()['error'] == 'Geen toegang tot deze pagina'

    def test_denied_module_endpoint(self, client):
        login(client, 'verkoper')
        resp = client.get('/api/meldingen')
        assert resp.status_code == 403

    @pytest.mark.parametrize('query', ['page=2', 'session=x', 'page=2&session=x&periode=maand'])
    def test_query_keys_named_like_arguments(self, client, query):
        login(client, 'admin')
        resp = client.get(f'/api/pages/dashboard?{query}')

        assert resp.status_code == 200
        assert resp.get_json()['page'] == 'dashboard'

    def test_search_page_with_query(self, client):
        login(client, 'admin')
        view = client.get('/api/pages/zoeken?q=BMW').get_json()['view']
        assert view['toon_resultaten'] is True
        assert any(r['type'] == 'wagen' for r in view['resultaten'])


class TestWagensApi:

    def test_create_update_delete(self, client, store):
        login(client, 'verkoper')

        resp = client.post('/api/wagens', json={
            'merk': 'Audi', 'model': 'A4', 'stocknummer': 'AUD001', 'chassisnummer': 'WAU123',
        })
        assert resp.status_code == 200
        wagen_id = resp.get_json()['wagen']['id']

        resp = client.put(f'/api/wagens/{wagen_id}', json={'kleur': 'Blauw'})
        assert resp.get_json()['success'] is True
        assert client.get(f'/api/wagens/{wagen_id}').get_json()['kleur'] == 'Blauw'

        client.delete(f'/api/wagens/{wagen_id}')
        assert client.get(f'/api/wagens/{wagen_id}').status_code == 404

    def test_create_requires_fields(self, client):
        login(client, 'admin')
        resp = client.post('/api/wagens', json={'merk': 'Audi'})
        assert resp.status_code == 400

    def test_update_unknown_id_succeeds(self, client, store):
        login(client, 'admin')
        resp = client.put('/api/wagens/999', json={'kleur': 'Groen'})
        assert resp.get_json()['success'] is True
        assert store.get('wagens') is None

    def test_form_edit_unticks_missing_checkboxes(self, client):
        login(client, 'admin')
        client.put('/api/wagens/1', data={'oldtimer': 'on'})
        assert client.get('/api/wagens/1').get_json()['oldtimer'] is True

        resp = client.put('/api/wagens/1', data={'kleur': 'Grijs'})

        assert resp.get_json()['success'] is True
        wagen = client.get('/api/wagens/1').get_json()
        assert wagen['oldtimer'] is False
        assert wagen['documenten']['aankoop']['compleet'] is False

    def test_list_filter(self, client):
        login(client, 'admin')
        data = client.get('/api/wagens?keuringsstatus=groen').get_json()
        assert [w['merk'] for w in data['wagens']] == ['BMW']


class TestOtherModules:

    def test_multipart_document_upload(self, client):
        login(client, 'administratie', 'marie')
        resp = client.post('/api/documenten', data={
            'naam': 'Factuur', 'type': 'factuur', 'categorie': 'financieel',
            'bestand': (io.BytesIO(b'%PDF-1.4 test'), 'factuur.pdf'),
        }, content_type='multipart/form-data')

        assert resp.status_code == 200
        document = resp.get_json()['document']
        assert document['bestandsnaam'] == 'factuur.pdf'
        assert document['geupload_door'] == 'marie'

    def test_json_upload_with_text_size(self, client):
        login(client, 'administratie')
        bestand = {'name': 'a.pdf', 'size': '2048', 'mimetype': 'application/pdf'}
        resp = client.post('/api/documenten', json={
            'naam': 'Attest', 'type': 'attest', 'categorie': 'wagen', 'bestand': bestand,
        })
        assert resp.status_code == 200

        resp = client.post('/api/documenten', json={
            'naam': 'Attest', 'type': 'attest', 'categorie': 'wagen', 'bestand': dict(bestand, size='veel'),
        })
        assert resp.status_code == 400
        assert resp.get_json()['error'] == 'Ongeldige bestandsgrootte'

    def test_upload_without_file(self, client):
        login(client, 'administratie')
        resp = client.post('/api/documenten', json={'naam': 'x', 'type': 'y', 'categorie': 'wagen'})
        assert resp.status_code == 400
        assert resp.get_json()['error'] == 'Selecteer een bestand om te uploaden'

    def test_complete_reminder(self, client, store):
        login(client, 'administratie', 'marie')
        assert client.post('/api/meldingen/1/voltooid').status_code == 200
        melding = [m for m in store.get('meldingen') if m['id'] == 1][0]
        assert melding['voltooid_door'] == 'marie'

    def test_mark_all_read(self, client):
        login(client, 'admin')
        assert client.post('/api/meldingen/gelezen').get_json()['gelezen'] == 3

    def test_finance_cost_entry(self, client):
        login(client, 'administratie')
        client.post('/api/financien/kosten', json={'beschrijving': 'Olie', 'categorie': 'onderhoud', 'bedrag': 80})
        assert client.get('/api/financien/samenvatting').get_json()['totaleKosten'] == 80

    def test_staff_create(self, client):
        login(client, 'personeel')
        resp = client.post('/api/personeel', json={
            'voornaam': 'Piet', 'achternaam': 'Smit', 'email': 'p@x.nl',
            'functie': 'Monteur', 'startdatum': '2024-01-01',
        })
        assert resp.get_json()['medewerker']['naam'] == 'Piet Smit'

    def test_health(self, client):
        assert client.get('/health').get_json()['status'] == 'ok'

    def test_unknown_route_is_json(self, client):
        assert client.get('/api/bestaat-niet').get_json()['error'] == 'Not found'
