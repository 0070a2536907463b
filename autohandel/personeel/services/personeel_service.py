"""Personeel Service - staff records, their document checklist and views."""
import logging
from typing import Any, Dict, List, Optional

from core.activity import ActivityRepository
from core.exceptions import ValidationError
from core.results import ServiceResult
from core.utils.form_helpers import clean_text, is_checked, require_fields
from ..repositories import MedewerkerRepository

logger = logging.getLogger('autohandel.personeel.service')

REQUIRED_FIELDS = ('voornaam', 'achternaam', 'email', 'functie', 'startdatum')
CONTACT_FIELDS = ('email', 'telefoon', 'functie', 'startdatum', 'adres')
STATUSES = ('actief', 'verlof', 'inactief')

# (document type, form checkbox)
STAFF_DOCUMENTS = (
    ('Contract', 'doc_contract'),
    ('CV', 'doc_cv'),
    ('ID', 'doc_identiteit'),
    ('Diploma', 'doc_diploma'),
)


def _documents_from_form(data: Dict[str, Any]) -> List[Dict[str, str]]:
    return [
        {'type': doc_type, 'status': 'compleet' if is_checked(data.get(field)) else 'ontbreekt'}
        for doc_type, field in STAFF_DOCUMENTS
    ]


def _full_name(data: Dict[str, Any]) -> str:
    return f"{clean_text(data.get('voornaam')) or ''} {clean_text(data.get('achternaam')) or ''}".strip()


class PersoneelService:
    """Service for staff management."""

    def __init__(self, repo: MedewerkerRepository = None, activity_repo: ActivityRepository = None):
        self.repo = repo or MedewerkerRepository()
        self.activity_repo = activity_repo or ActivityRepository()

    def get(self, medewerker_id) -> Optional[Dict[str, Any]]:
        return self.repo.get_by_id(medewerker_id)

    def create(self, data: Dict[str, Any], session=None) -> ServiceResult:
        """Create a staff member; new staff start as ``actief``."""
        try:
            require_fields(data, REQUIRED_FIELDS)
        except ValidationError as e:
            return ServiceResult(success=False, error=str(e))

        record = {'naam': _full_name(data), 'status': 'actief'}
        for field in CONTACT_FIELDS:
            record[field] = clean_text(data.get(field))
        record['documenten'] = _documents_from_form(data)
        medewerker = self.repo.create(record)

        self.activity_repo.record(
            'fa-user-plus', f'Nieuw personeelslid: {medewerker["naam"]}',
            username=session.username if session else None,
        )
        return ServiceResult(success=True, data=medewerker)

    def update(self, medewerker_id, data: Dict[str, Any], form_post: bool = False) -> ServiceResult:
        """Overwrite submitted fields; unknown ids are ignored.

        On a ``form_post`` the document checklist is always rewritten, since
        browsers leave unticked checkboxes out of the submission.
        """
        try:
            require_fields(data, REQUIRED_FIELDS, partial=True)
            if data.get('status') and data['status'] not in STATUSES:
                raise ValidationError(f'Ongeldige status: {data["status"]}', fields=['status'])
        except ValidationError as e:
            return ServiceResult(success=False, error=str(e))

        def _apply(medewerker):
            if 'voornaam' in data or 'achternaam' in data:
                voornaam, achternaam = _split_name(medewerker.get('naam'))
                medewerker['naam'] = _full_name({
                    'voornaam': data.get('voornaam', voornaam),
                    'achternaam': data.get('achternaam', achternaam),
                })
            for field in CONTACT_FIELDS:
                if field in data:
                    medewerker[field] = clean_text(data.get(field))
            if data.get('status'):
                medewerker['status'] = data['status']
            if form_post or any(field in data for _, field in STAFF_DOCUMENTS):
                medewerker['documenten'] = _documents_from_form(data)

        medewerker = self.repo.update(medewerker_id, _apply)
        return ServiceResult(success=True, data=medewerker)

    def delete(self, medewerker_id) -> ServiceResult:
        self.repo.remove(medewerker_id)
        return ServiceResult(success=True)

    def form_values(self, medewerker_id) -> Optional[Dict[str, Any]]:
        """Values to pre-fill the edit form; ``naam`` is split at the first space."""
        medewerker = self.repo.get_by_id(medewerker_id)
        if medewerker is None:
            return None
        voornaam, achternaam = _split_name(medewerker.get('naam'))
        values = {'id': medewerker['id'], 'voornaam': voornaam, 'achternaam': achternaam}
        for field in CONTACT_FIELDS:
            values[field] = medewerker.get(field) or ''
        statuses = {d.get('type'): d.get('status') for d in medewerker.get('documenten') or []}
        for doc_type, field in STAFF_DOCUMENTS:
            values[field] = statuses.get(doc_type) == 'compleet'
        return values

    def build_view(self, session=None, **filters) -> Dict[str, Any]:
        medewerkers = self.repo.filter(status=filters.get('status'), q=filters.get('q'))
        rows = []
        for medewerker in medewerkers:
            missing = [d.get('type') for d in medewerker.get('documenten') or [] if d.get('status') != 'compleet']
            rows.append(dict(medewerker, ontbrekende_documenten=missing))
        return {'medewerkers': rows, 'totaal': len(rows)}


def _split_name(naam: Optional[str]):
    parts = (naam or '').split(' ')
    return parts[0], ' '.join(parts[1:])
