"""Tests for the finance page, cost entries and the dashboard."""
import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'autohandel'))

from core.activity import ActivityRepository
from core.exceptions import AutoHandelError
from core.auth.models import Session
from core.storage import KVStore, LocalStore
from dashboard.services import ALERTS_KEY, DashboardService
from documenten.repositories import DocumentRepository
from financien.repositories import CostRepository
from financien.services import FinanceService
from wagens.repositories import WagenRepository


@pytest.fixture
def store(tmp_path):
    local = LocalStore(str(tmp_path / 'financien.db'))
    yield KVStore(fallback=local)
    local.close()


@pytest.fixture
def finance(store):
    return FinanceService(WagenRepository(store), CostRepository(store))


@pytest.fixture
def dashboard(store):
    return DashboardService(store=store)


class TestFinanceService:

    def test_summary_over_seed_has_no_sales(self, finance):
        assert finance.summary()['totaleOmzet'] == 0

    def test_summary_after_sale(self, finance, store):
        WagenRepository(store).update(1, lambda w: w.update(status='verkocht'))
        summary = finance.summary()
        assert summary['totaleOmzet'] == 32000
        assert summary['totaleWinst'] == 7000

    def test_add_cost(self, finance, store):
        result = finance.add_cost({'beschrijving': 'Banden', 'categorie': 'onderhoud', 'bedrag': '320'})

        assert result.success
        assert store.get('kosten')[0]['bedrag'] == 320.0
        assert finance.summary()['totaleKosten'] == 320.0

    def test_add_cost_invalid_amount(self, finance, store):
        result = finance.add_cost({'beschrijving': 'x', 'categorie': 'onderhoud', 'bedrag': 'veel'})
        assert not result.success
        assert store.get('kosten') is None

    def test_costs_cannot_be_changed(self, store):
        costs = CostRepository(store)
        costs.add({'beschrijving': 'Olie', 'bedrag': 80})

        with pytest.raises(AutoHandelError):
            costs.update(1, lambda k: k.update(bedrag=0))
        with pytest.raises(AutoHandelError):
            costs.remove(1)
        assert store.get('kosten') == [{'beschrijving': 'Olie', 'bedrag': 80}]

    def test_build_view(self, finance):
        view = finance.build_view(periode='maand')
        assert view['periode'] == 'maand'
        assert view['openstaandeBedragen'] == 15750
        assert [w['wagen'] for w in view['wagenWinsten']] == ['BMW 320d', 'Mercedes A180']
        assert view['kostenCategorieen']['inkoop'] == 0
        assert len(view['dagvaardingen']) == 1


class TestDashboardService:

    def test_alerts_from_seed(self, dashboard):
        assert dashboard.alerts() == {'keuringen': 1, 'documenten': 1, 'betalingen': 15750, 'stock': 1}

    def test_stored_overrides(self, dashboard, store):
        store.set(ALERTS_KEY, {'documenten': 7})
        assert dashboard.alerts()['documenten'] == 7

    def test_quick_actions_follow_role(self, dashboard):
        view = dashboard.build_view(Session('jan', 'verkoper', ''))
        assert view['welkom'] == 'jan'
        assert [a['page'] for a in view['snelle_acties']] == ['wagens', 'documenten']

    def test_activity_feed(self, dashboard, store):
        assert len(dashboard.build_view(Session('a', 'admin', ''))['recente_activiteiten']) == 3

        ActivityRepository(store).record('fa-car', 'Test')
        feed = dashboard.build_view(Session('a', 'admin', ''))['recente_activiteiten']
        assert [e['description'] for e in feed] == ['Test']

    def test_activity_feed_is_capped(self, store):
        activity = ActivityRepository(store)
        for i in range(25):
            activity.record('fa-car', f'Wagen {i}')
        feed = activity.recent()
        assert len(feed) == 20
        assert feed[0]['description'] == 'Wagen 24'
