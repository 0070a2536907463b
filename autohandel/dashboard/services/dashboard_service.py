"""Dashboard Service - alert tiles, quick actions and the activity feed."""
import logging
from typing import Any, Dict

from core.activity import ActivityRepository
from core.storage import get_store
from documenten.repositories import DocumentRepository
from financien.services.aggregation import dashboard_alerts
from wagens.repositories import WagenRepository

logger = logging.getLogger('autohandel.dashboard.service')

ALERTS_KEY = 'dashboard_alerts'

QUICK_ACTIONS = [
    {'action': 'nieuwe-wagen', 'label': 'Nieuwe wagen', 'icon': 'fa-plus-circle', 'page': 'wagens'},
    {'action': 'nieuw-personeelslid', 'label': 'Nieuw personeelslid', 'icon': 'fa-user-plus', 'page': 'personeel'},
    {'action': 'upload-document', 'label': 'Upload document', 'icon': 'fa-upload', 'page': 'documenten'},
    {'action': 'nieuwe-herinnering', 'label': 'Nieuwe herinnering', 'icon': 'fa-bell', 'page': 'meldingen'},
]


class DashboardService:

    def __init__(
        self,
        wagen_repo: WagenRepository = None,
        document_repo: DocumentRepository = None,
        activity_repo: ActivityRepository = None,
        store=None,
    ):
        self.wagen_repo = wagen_repo or WagenRepository(store)
        self.document_repo = document_repo or DocumentRepository(store)
        self.activity_repo = activity_repo or ActivityRepository(store)
        self._store = store

    @property
    def store(self):
        return self._store if self._store is not None else get_store()

    def alerts(self) -> Dict[str, Any]:
        overrides = self.store.get(ALERTS_KEY) or {}
        return dashboard_alerts(self.wagen_repo.load_all(), self.document_repo.load_all(), overrides)

    def build_view(self, session, **_) -> Dict[str, Any]:
        return {
            'welkom': session.username,
            'alerts': self.alerts(),
            'snelle_acties': [a for a in QUICK_ACTIONS if session.has_access(a['page'])],
            'recente_activiteiten': self.activity_repo.recent(),
        }
