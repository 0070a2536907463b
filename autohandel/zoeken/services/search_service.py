"""Search Service - global search across vehicles, staff and reminders.

A linear scan over every loaded record per query; collections are small
enough that no index is kept. Results come back grouped by type (vehicles,
then staff, then reminders), each group in stored order.

Keyword triggers (keuring, oldtimer, documenten, openstaande) match regardless
of case, like the substring search itself.
"""
import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, List

from core.utils.form_helpers import text_matches
from meldingen.repositories import MeldingRepository
from personeel.repositories import MedewerkerRepository
from wagens.repositories import WagenRepository

logger = logging.getLogger('autohandel.zoeken.service')

MIN_QUERY_LENGTH = 3

WAGEN_FIELDS = ('merk', 'model', 'chassisnummer', 'nummerplaat', 'stocknummer')
MEDEWERKER_FIELDS = ('naam', 'email', 'functie')
MELDING_FIELDS = ('titel', 'beschrijving', 'gerelateerd_item')

SUGGESTIONS = ['keuring rood', 'oldtimer', 'documenten ontbreken', 'openstaande betalingen']


@dataclass
class SearchResult:
    type: str
    title: str
    subtitle: str
    details: str
    id: Any

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _documents_incomplete(wagen: Dict[str, Any]) -> bool:
    documenten = wagen.get('documenten') or {}
    return not (documenten.get('aankoop') or {}).get('compleet') or \
        not (documenten.get('verkoop') or {}).get('compleet')


def _wagen_matches(wagen: Dict[str, Any], query: str) -> bool:
    if text_matches(wagen, query, WAGEN_FIELDS):
        return True
    keywords = query.lower()
    if 'keuring' in keywords and wagen.get('keuringsstatus') == 'rood':
        return True
    if 'oldtimer' in keywords and wagen.get('oldtimer'):
        return True
    if 'documenten' in keywords and _documents_incomplete(wagen):
        return True
    return False


def _melding_matches(melding: Dict[str, Any], query: str) -> bool:
    if text_matches(melding, query, MELDING_FIELDS):
        return True
    return 'openstaande' in query.lower() and melding.get('type') == 'betaling'


class SearchService:

    def __init__(
        self,
        wagen_repo: WagenRepository = None,
        medewerker_repo: MedewerkerRepository = None,
        melding_repo: MeldingRepository = None,
    ):
        self.wagen_repo = wagen_repo or WagenRepository()
        self.medewerker_repo = medewerker_repo or MedewerkerRepository()
        self.melding_repo = melding_repo or MeldingRepository()

    def search(self, query: str) -> List[SearchResult]:
        """Match ``query`` against every collection; fewer than 3 characters finds nothing."""
        query = query or ''
        if len(query) < MIN_QUERY_LENGTH:
            return []

        results = []
        for wagen in self.wagen_repo.load_all():
            if _wagen_matches(wagen, query):
                results.append(SearchResult(
                    type='wagen',
                    title=f"{wagen.get('merk')} {wagen.get('model')}",
                    subtitle=f"Stocknummer: {wagen.get('stocknummer')}",
                    details=f"Keuringsstatus: {wagen.get('keuringsstatus')}, Status: {wagen.get('status')}",
                    id=wagen.get('id'),
                ))

        for medewerker in self.medewerker_repo.load_all():
            if text_matches(medewerker, query, MEDEWERKER_FIELDS):
                results.append(SearchResult(
                    type='medewerker',
                    title=medewerker.get('naam'),
                    subtitle=medewerker.get('functie'),
                    details=f"Email: {medewerker.get('email')}, Status: {medewerker.get('status')}",
                    id=medewerker.get('id'),
                ))

        for melding in self.melding_repo.load_all():
            if _melding_matches(melding, query):
                results.append(SearchResult(
                    type='melding',
                    title=melding.get('titel'),
                    subtitle=f"Type: {melding.get('type')}, Prioriteit: {melding.get('prioriteit')}",
                    details=melding.get('beschrijving'),
                    id=melding.get('id'),
                ))

        logger.debug(f'Search {query!r}: {len(results)} results')
        return results

    def build_view(self, session=None, q: str = None, **_) -> Dict[str, Any]:
        """Search page: suggestions always, results only for queries of 3+ characters."""
        query = q or ''
        visible = len(query) >= MIN_QUERY_LENGTH
        results = self.search(query) if visible else []
        return {
            'query': query,
            'suggesties': list(SUGGESTIONS),
            'toon_resultaten': visible,
            'resultaten': [r.to_dict() for r in results],
            'aantal': len(results),
        }
