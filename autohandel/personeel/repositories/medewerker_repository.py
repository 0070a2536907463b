"""Medewerker Repository - staff records under the ``medewerkers`` key."""
from typing import Any, Dict, List, Optional

from core.base_repository import EntityRepository
from core.utils.form_helpers import text_matches

SEARCHABLE_FIELDS = ('naam', 'email', 'telefoon', 'functie', 'adres', 'status')


class MedewerkerRepository(EntityRepository):
    """Repository for staff member records."""
    key = 'medewerkers'
    seed = [
        {
            'id': 1,
            'naam': 'Jan Janssen',
            'email': 'jan@autohandel.nl',
            'functie': 'Verkoper',
            'startdatum': '2023-01-15',
            'status': 'actief',
            'documenten': [
                {'type': 'Contract', 'status': 'compleet'},
                {'type': 'CV', 'status': 'compleet'},
                {'type': 'ID', 'status': 'ontbreekt'},
            ],
        },
        {
            'id': 2,
            'naam': 'Marie Pieters',
            'email': 'marie@autohandel.nl',
            'functie': 'Administratie',
            'startdatum': '2023-03-01',
            'status': 'verlof',
            'documenten': [
                {'type': 'Contract', 'status': 'compleet'},
                {'type': 'CV', 'status': 'compleet'},
                {'type': 'ID', 'status': 'compleet'},
            ],
        },
    ]

    def filter(self, status: Optional[str] = None, q: Optional[str] = None) -> List[Dict[str, Any]]:
        result = []
        for medewerker in self.load_all():
            if status and medewerker.get('status') != status:
                continue
            if q and not text_matches(medewerker, q, SEARCHABLE_FIELDS):
                continue
            result.append(medewerker)
        return result
