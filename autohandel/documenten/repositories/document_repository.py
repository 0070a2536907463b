"""Document Repository - document metadata under the ``documenten`` key.

Only metadata is stored; file contents never reach storage.
"""
from typing import Any, Dict, List, Optional

from core.base_repository import EntityRepository
from core.utils.form_helpers import text_matches

SEARCHABLE_FIELDS = ('naam', 'type', 'categorie', 'gerelateerd_aan', 'bestandsnaam', 'status')


class DocumentRepository(EntityRepository):
    """Repository for document metadata records."""
    key = 'documenten'
    seed = [
        {
            'id': 1,
            'naam': 'BMW 320d Inschrijvingsbewijs deel 1',
            'type': 'inschrijving',
            'categorie': 'wagen',
            'gerelateerd_aan': 'BMW 320d (BMW001)',
            'upload_datum': '2024-12-15',
            'vervaldatum': None,
            'status': 'compleet',
            'ocr_verwerkt': True,
            'bestandsgrootte': '2.4 MB',
            'bestandstype': 'PDF',
        },
        {
            'id': 2,
            'naam': 'Jan Janssen Contract',
            'type': 'contract',
            'categorie': 'personeel',
            'gerelateerd_aan': 'Jan Janssen',
            'upload_datum': '2024-01-15',
            'vervaldatum': '2025-01-15',
            'status': 'compleet',
            'ocr_verwerkt': True,
            'bestandsgrootte': '1.8 MB',
            'bestandstype': 'PDF',
        },
        {
            'id': 3,
            'naam': 'Mercedes A180 Aankoopbordel',
            'type': 'contract',
            'categorie': 'wagen',
            'gerelateerd_aan': 'Mercedes A180 (MER001)',
            'upload_datum': None,
            'vervaldatum': None,
            'status': 'ontbreekt',
            'ocr_verwerkt': False,
            'bestandsgrootte': None,
            'bestandstype': None,
        },
    ]

    def filter(
        self,
        categorie: Optional[str] = None,
        status: Optional[str] = None,
        type: Optional[str] = None,
        q: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        result = []
        for document in self.load_all():
            if categorie and document.get('categorie') != categorie:
                continue
            if status and document.get('status') != status:
                continue
            if type and document.get('type') != type:
                continue
            if q and not text_matches(document, q, SEARCHABLE_FIELDS):
                continue
            result.append(document)
        return result
