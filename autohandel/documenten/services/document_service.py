"""Document Service - metadata-only uploads, edits and the documents view.

Upload records the chosen file's name, size and MIME type. OCR is not
performed; ``ocr_verwerkt`` only reflects the checkbox on the upload form.
"""
import logging
from datetime import date
from typing import Any, Dict, Optional

from core.activity import ActivityRepository
from core.exceptions import ValidationError
from core.results import ServiceResult
from core.utils.form_helpers import clean_text, is_checked, parse_int, require_fields
from ..repositories import DocumentRepository

logger = logging.getLogger('autohandel.documenten.service')

REQUIRED_FIELDS = ('naam', 'type', 'categorie')
EDITABLE_FIELDS = ('naam', 'type', 'categorie', 'gerelateerd_aan', 'vervaldatum')
CATEGORIES = ('wagen', 'personeel', 'financieel', 'juridisch')
STATUSES = ('compleet', 'ontbreekt', 'verlopen')


def format_file_size(size_bytes: int) -> str:
    """Size in megabytes with one decimal, e.g. ``'2.4 MB'``."""
    return f'{size_bytes / (1024 * 1024):.1f} MB'


class DocumentService:
    """Service for document metadata."""

    def __init__(self, repo: DocumentRepository = None, activity_repo: ActivityRepository = None):
        self.repo = repo or DocumentRepository()
        self.activity_repo = activity_repo or ActivityRepository()

    def get(self, document_id) -> Optional[Dict[str, Any]]:
        return self.repo.get_by_id(document_id)

    def upload(self, data: Dict[str, Any], file_info: Optional[Dict[str, Any]], session=None) -> ServiceResult:
        """Record an uploaded document.

        Args:
            data: Form fields (naam, type, categorie, gerelateerd_aan, vervaldatum, ocr_verwerken)
            file_info: Dict with name, size (bytes) and mimetype of the chosen file
            session: Acting session, stored as ``geupload_door``
        """
        if not file_info or not file_info.get('name'):
            return ServiceResult(success=False, error='Selecteer een bestand om te uploaden')
        try:
            require_fields(data, REQUIRED_FIELDS)
            if data['categorie'] not in CATEGORIES:
                raise ValidationError(f'Ongeldige categorie: {data["categorie"]}', fields=['categorie'])
        except ValidationError as e:
            return ServiceResult(success=False, error=str(e))

        size = parse_int(file_info.get('size') or 0)
        if size is None or size < 0:
            return ServiceResult(success=False, error='Ongeldige bestandsgrootte')

        document = self.repo.create({
            'naam': clean_text(data.get('naam')),
            'type': data.get('type'),
            'categorie': data.get('categorie'),
            'gerelateerd_aan': clean_text(data.get('gerelateerd_aan')),
            'vervaldatum': clean_text(data.get('vervaldatum')),
            'upload_datum': date.today().isoformat(),
            'status': 'compleet',
            'ocr_verwerkt': is_checked(data.get('ocr_verwerken')),
            'bestandsnaam': file_info['name'],
            'bestandsgrootte': format_file_size(size),
            'bestandstype': file_info.get('mimetype'),
            'geupload_door': session.username if session else None,
        })

        related = f' voor {document["gerelateerd_aan"]}' if document.get('gerelateerd_aan') else ''
        self.activity_repo.record(
            'fa-file-alt', f'Document geüpload{related}',
            username=session.username if session else None,
        )
        return ServiceResult(success=True, data=document)

    def update(self, document_id, data: Dict[str, Any]) -> ServiceResult:
        """Overwrite submitted metadata fields; unknown ids are ignored."""
        try:
            require_fields(data, REQUIRED_FIELDS, partial=True)
            if data.get('status') and data['status'] not in STATUSES:
                raise ValidationError(f'Ongeldige status: {data["status"]}', fields=['status'])
            if data.get('categorie') and data['categorie'] not in CATEGORIES:
                raise ValidationError(f'Ongeldige categorie: {data["categorie"]}', fields=['categorie'])
        except ValidationError as e:
            return ServiceResult(success=False, error=str(e))

        def _apply(document):
            for field in EDITABLE_FIELDS:
                if field in data:
                    document[field] = clean_text(data.get(field))
            if data.get('status'):
                document['status'] = data['status']

        document = self.repo.update(document_id, _apply)
        return ServiceResult(success=True, data=document)

    def delete(self, document_id) -> ServiceResult:
        self.repo.remove(document_id)
        return ServiceResult(success=True)

    def build_view(self, session=None, **filters) -> Dict[str, Any]:
        """Document list plus the summary tiles (total, missing, expired, OCR'd)."""
        all_documents = self.repo.load_all()
        documenten = self.repo.filter(
            categorie=filters.get('categorie'),
            status=filters.get('status'),
            type=filters.get('type'),
            q=filters.get('q'),
        )
        today = date.today().isoformat()
        return {
            'documenten': documenten,
            'statistieken': {
                'totaal': len(all_documents),
                'ontbrekend': sum(1 for d in all_documents if d.get('status') == 'ontbreekt'),
                'verlopen': sum(1 for d in all_documents if d.get('vervaldatum') and d['vervaldatum'] < today),
                'ocr_verwerkt': sum(1 for d in all_documents if d.get('ocr_verwerkt')),
            },
        }
