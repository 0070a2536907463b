"""Melding Service - reminders: create, complete, mark read, delete, view."""
import logging
from datetime import date, datetime
from typing import Any, Dict, Optional

from core.activity import ActivityRepository
from core.exceptions import ValidationError
from core.results import ServiceResult
from core.utils.form_helpers import clean_text, require_fields
from ..repositories import MeldingRepository

logger = logging.getLogger('autohandel.meldingen.service')

REQUIRED_FIELDS = ('titel', 'type', 'prioriteit', 'vervaldatum')
EDITABLE_FIELDS = ('titel', 'beschrijving', 'vervaldatum', 'toegewezen_aan', 'gerelateerd_item')
TYPES = ('keuring', 'documenten', 'betaling', 'onderhoud', 'verlof', 'algemeen')
PRIORITIES = ('hoog', 'normaal', 'laag')
STATUSES = ('open', 'voltooid', 'uitgesteld')

ICONS = {
    'keuring': 'fa-clipboard-check',
    'documenten': 'fa-file-alt',
    'betaling': 'fa-euro-sign',
    'onderhoud': 'fa-wrench',
    'verlof': 'fa-calendar-alt',
    'algemeen': 'fa-bell',
}


def time_until(date_string: Optional[str], today: date = None) -> Optional[str]:
    """Relative due label: 'vandaag', 'morgen', 'over N dagen' or 'N dagen geleden'."""
    if not date_string:
        return None
    try:
        target = date.fromisoformat(date_string[:10])
    except ValueError:
        return None
    days = (target - (today or date.today())).days
    if days < 0:
        return f'{abs(days)} dagen geleden'
    if days == 0:
        return 'vandaag'
    if days == 1:
        return 'morgen'
    return f'over {days} dagen'


def _check_choices(data: Dict[str, Any]):
    for field, choices in (('type', TYPES), ('prioriteit', PRIORITIES), ('status', STATUSES)):
        if data.get(field) and data[field] not in choices:
            raise ValidationError(f'Ongeldige {field}: {data[field]}', fields=[field])


class MeldingService:
    """Service for reminders."""

    def __init__(self, repo: MeldingRepository = None, activity_repo: ActivityRepository = None):
        self.repo = repo or MeldingRepository()
        self.activity_repo = activity_repo or ActivityRepository()

    def create(self, data: Dict[str, Any], session=None) -> ServiceResult:
        try:
            require_fields(data, REQUIRED_FIELDS)
            _check_choices(data)
        except ValidationError as e:
            return ServiceResult(success=False, error=str(e))

        melding = self.repo.create({
            'titel': clean_text(data.get('titel')),
            'beschrijving': clean_text(data.get('beschrijving')),
            'type': data['type'],
            'prioriteit': data['prioriteit'],
            'status': 'open',
            'vervaldatum': clean_text(data.get('vervaldatum')),
            'toegewezen_aan': clean_text(data.get('toegewezen_aan')),
            'gerelateerd_item': clean_text(data.get('gerelateerd_item')),
            'aangemaakt_door': session.username if session else None,
            'aangemaakt_op': datetime.now().isoformat(),
        })
        self.activity_repo.record(
            'fa-bell', f'Herinnering aangemaakt: {melding["titel"]}',
            username=session.username if session else None,
        )
        return ServiceResult(success=True, data=melding)

    def update(self, melding_id, data: Dict[str, Any]) -> ServiceResult:
        try:
            require_fields(data, REQUIRED_FIELDS, partial=True)
            _check_choices(data)
        except ValidationError as e:
            return ServiceResult(success=False, error=str(e))

        def _apply(melding):
            for field in EDITABLE_FIELDS:
                if field in data:
                    melding[field] = clean_text(data.get(field))
            for field in ('type', 'prioriteit', 'status'):
                if data.get(field):
                    melding[field] = data[field]

        return ServiceResult(success=True, data=self.repo.update(melding_id, _apply))

    def complete(self, melding_id, session) -> ServiceResult:
        """Mark a reminder ``voltooid`` with who/when. Unknown ids are ignored."""
        def _apply(melding):
            melding['status'] = 'voltooid'
            melding['voltooid_op'] = datetime.now().isoformat()
            melding['voltooid_door'] = session.username

        melding = self.repo.update(melding_id, _apply)
        if melding:
            logger.info(f'Melding {melding_id} completed by {session.username}')
        return ServiceResult(success=True, data=melding)

    def mark_all_read(self, session) -> ServiceResult:
        count = self.repo.mark_all_read(session.username, datetime.now().isoformat())
        return ServiceResult(success=True, data={'gelezen': count})

    def delete(self, melding_id) -> ServiceResult:
        self.repo.remove(melding_id)
        return ServiceResult(success=True)

    def build_view(self, session=None, **filters) -> Dict[str, Any]:
        meldingen = self.repo.filter(
            type=filters.get('type'),
            prioriteit=filters.get('prioriteit'),
            status=filters.get('status'),
        )
        rows = [
            dict(
                m,
                icon=ICONS.get(m.get('type'), 'fa-bell'),
                toegewezen_aan=m.get('toegewezen_aan') or 'Niemand',
                tijd_tot_vervaldatum=time_until(m.get('vervaldatum')),
            )
            for m in meldingen
        ]
        return {
            'meldingen': rows,
            'open': sum(1 for m in meldingen if m.get('status') == 'open'),
        }
