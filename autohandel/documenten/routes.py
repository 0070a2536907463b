"""Documenten Module Routes."""
from flask import jsonify, request
from flask_login import current_user

from . import documenten_bp
from .services import DocumentService
from core.utils.api_helpers import module_required, get_form_data, get_filters, error_response

_document_service = DocumentService()


def _uploaded_file_info():
    """Name, size and MIME type of the uploaded file; the bytes are discarded."""
    upload = request.files.get('bestand')
    if upload is None:
        return None
    upload.stream.seek(0, 2)
    size = upload.stream.tell()
    return {'name': upload.filename, 'size': size, 'mimetype': upload.mimetype}


@documenten_bp.route('/api/documenten', methods=['GET'])
@module_required('documenten')
def api_get_documenten():
    """API: Document list, optionally filtered by categorie, status, type and q."""
    filters = get_filters('categorie', 'status', 'type', 'q')
    return jsonify(_document_service.build_view(current_user.session, **filters))


@documenten_bp.route('/api/documenten', methods=['POST'])
@module_required('documenten')
def api_upload_document():
    """API: Upload a document (multipart with ``bestand``, or JSON with a ``bestand`` object)."""
    data = get_form_data()
    file_info = _uploaded_file_info()
    if file_info is None and isinstance(data.get('bestand'), dict):
        file_info = data['bestand']

    result = _document_service.upload(data, file_info, session=current_user.session)
    if not result.success:
        return error_response(result.error)
    return jsonify({'success': True, 'message': 'Document succesvol geüpload', 'document': result.data})


@documenten_bp.route('/api/documenten/<int:document_id>', methods=['GET'])
@module_required('documenten')
def api_get_document(document_id):
    """API: Get a single document's metadata."""
    document = _document_service.get(document_id)
    if not document:
        return error_response('Document niet gevonden', 404)
    return jsonify(document)


@documenten_bp.route('/api/documenten/<int:document_id>', methods=['PUT'])
@module_required('documenten')
def api_update_document(document_id):
    """API: Update document metadata."""
    result = _document_service.update(document_id, get_form_data())
    if not result.success:
        return error_response(result.error)
    return jsonify({'success': True, 'message': 'Document bijgewerkt'})


@documenten_bp.route('/api/documenten/<int:document_id>', methods=['DELETE'])
@module_required('documenten')
def api_delete_document(document_id):
    """API: Delete a document."""
    _document_service.delete(document_id)
    return jsonify({'success': True, 'message': 'Document verwijderd'})
