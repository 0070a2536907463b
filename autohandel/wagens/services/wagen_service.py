"""Wagen Service - form handling and views for the vehicle inventory.

Routes call these methods instead of touching the repository directly.
"""
import logging
from typing import Any, Dict, List, Optional

from core.activity import ActivityRepository
from core.exceptions import ValidationError
from core.results import ServiceResult
from core.utils.form_helpers import clean_text, is_checked, parse_float, parse_int, require_fields
from financien.services.aggregation import vehicle_margin
from ..repositories import WagenRepository

logger = logging.getLogger('autohandel.wagens.service')

REQUIRED_FIELDS = ('merk', 'model', 'stocknummer', 'chassisnummer')

TEXT_FIELDS = (
    'merk', 'model', 'stocknummer', 'chassisnummer', 'nummerplaat', 'eerste_inschrijving',
    'kleur', 'brandstof', 'transmissie', 'werkzaamheden',
)
INT_FIELDS = ('bouwjaar', 'kmstand', 'vermogen')
PRICE_FIELDS = ('inkoopprijs', 'verkoopprijs')
FLAG_FIELDS = ('oldtimer', 'lichte_vracht')

STATUSES = ('stock', 'consignatie', 'verkocht', 'onderhoud')
KEURINGSSTATUSES = ('groen', 'oranje', 'rood', 'zwart')

# A document group is complete only when every item in it is ticked
DOCUMENT_CHECKLISTS = {
    'aankoop': ('doc_aankoopbordel', 'doc_marge_attest', 'doc_factuur',
                'doc_inschrijving_1', 'doc_inschrijving_2', 'doc_coc'),
    'verkoop': ('doc_verkoopcontract', 'doc_overdracht', 'doc_betaling'),
    'garantie': ('doc_garantie_contract', 'doc_garantie_voorwaarden', 'doc_onderhoudsboek'),
}


def _parse_form(data: Dict[str, Any], partial: bool = False, form_post: bool = False) -> Dict[str, Any]:
    """Map submitted form values to vehicle fields.

    With ``partial`` only submitted fields are returned, so an edit leaves
    untouched fields alone. Browsers omit unticked checkboxes, so on a
    ``form_post`` every flag and document checkbox is read, absent meaning off.
    """
    fields = {}
    for name in TEXT_FIELDS:
        if not partial or name in data:
            fields[name] = clean_text(data.get(name))
    for name in INT_FIELDS:
        if not partial or name in data:
            fields[name] = parse_int(data.get(name))
    for name in PRICE_FIELDS:
        if not partial or name in data:
            fields[name] = parse_float(data.get(name))
    for name in FLAG_FIELDS:
        if not partial or form_post or name in data:
            fields[name] = is_checked(data.get(name))

    if not partial or data.get('status'):
        fields['status'] = data.get('status') or 'stock'
    if not partial or data.get('keuringsstatus'):
        fields['keuringsstatus'] = data.get('keuringsstatus') or 'rood'
    if fields.get('status') not in (None,) + STATUSES:
        raise ValidationError(f'Ongeldige status: {fields["status"]}', fields=['status'])
    if fields.get('keuringsstatus') not in (None,) + KEURINGSSTATUSES:
        raise ValidationError(f'Ongeldige keuringsstatus: {fields["keuringsstatus"]}', fields=['keuringsstatus'])

    submitted_docs = any(doc in data for docs in DOCUMENT_CHECKLISTS.values() for doc in docs)
    if not partial or form_post or submitted_docs:
        fields['documenten'] = {
            group: {'compleet': all(is_checked(data.get(doc)) for doc in docs)}
            for group, docs in DOCUMENT_CHECKLISTS.items()
        }
    return fields


class WagenService:
    """Service for vehicle inventory business logic."""

    def __init__(self, repo: WagenRepository = None, activity_repo: ActivityRepository = None):
        self.repo = repo or WagenRepository()
        self.activity_repo = activity_repo or ActivityRepository()

    def get_all(self, **filters) -> List[Dict[str, Any]]:
        return self.repo.filter(**filters)

    def get(self, wagen_id) -> Optional[Dict[str, Any]]:
        return self.repo.get_by_id(wagen_id)

    def create(self, data: Dict[str, Any], session=None) -> ServiceResult:
        """Create a vehicle from form input."""
        try:
            require_fields(data, REQUIRED_FIELDS)
            wagen = self.repo.create(_parse_form(data))
        except ValidationError as e:
            return ServiceResult(success=False, error=str(e))

        self.activity_repo.record(
            'fa-car', f'Nieuwe wagen toegevoegd: {wagen["merk"]} {wagen["model"]}',
            username=session.username if session else None,
        )
        return ServiceResult(success=True, data=wagen)

    def update(self, wagen_id, data: Dict[str, Any], form_post: bool = False) -> ServiceResult:
        """Overwrite submitted fields on the vehicle; unknown ids are ignored.

        ``form_post`` marks an HTML form submission, where missing checkboxes are unticked.
        """
        try:
            require_fields(data, REQUIRED_FIELDS, partial=True)
            fields = _parse_form(data, partial=True, form_post=form_post)
        except ValidationError as e:
            return ServiceResult(success=False, error=str(e))

        wagen = self.repo.update(wagen_id, lambda w: w.update(fields))
        return ServiceResult(success=True, data=wagen)

    def delete(self, wagen_id) -> ServiceResult:
        self.repo.remove(wagen_id)
        return ServiceResult(success=True)

    def form_values(self, wagen_id) -> Optional[Dict[str, Any]]:
        """Values to pre-fill the edit form, including document checkboxes."""
        wagen = self.repo.get_by_id(wagen_id)
        if wagen is None:
            return None
        values = {k: v for k, v in wagen.items() if k != 'documenten'}
        documenten = wagen.get('documenten') or {}
        for group, docs in DOCUMENT_CHECKLISTS.items():
            compleet = bool((documenten.get(group) or {}).get('compleet'))
            for doc in docs:
                values[doc] = compleet
        values.update(vehicle_margin(wagen))
        return values

    def build_view(self, session=None, **filters) -> Dict[str, Any]:
        """Vehicle list with derived profit and margin per row."""
        wagens = self.repo.filter(
            status=filters.get('status'),
            keuringsstatus=filters.get('keuringsstatus'),
            type=filters.get('type'),
            q=filters.get('q'),
        )
        rows = [dict(w, **vehicle_margin(w)) for w in wagens]
        return {'wagens': rows, 'totaal': len(rows)}
