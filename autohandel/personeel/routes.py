"""Personeel Module Routes."""
from flask import jsonify, request
from flask_login import current_user

from . import personeel_bp
from .services import PersoneelService
from core.utils.api_helpers import module_required, get_form_data, get_filters, error_response

_personeel_service = PersoneelService()


@personeel_bp.route('/api/personeel', methods=['GET'])
@module_required('personeel')
def api_get_medewerkers():
    """API: Staff list, optionally filtered by status and q."""
    filters = get_filters('status', 'q')
    return jsonify(_personeel_service.build_view(current_user.session, **filters))


@personeel_bp.route('/api/personeel', methods=['POST'])
@module_required('personeel')
def api_create_medewerker():
    """API: Create a staff member."""
    result = _personeel_service.create(get_form_data(), session=current_user.session)
    if not result.success:
        return error_response(result.error)
    return jsonify({'success': True, 'message': 'Personeelslid succesvol toegevoegd', 'medewerker': result.data})


@personeel_bp.route('/api/personeel/<int:medewerker_id>', methods=['GET'])
@module_required('personeel')
def api_get_medewerker(medewerker_id):
    """API: Get a single staff member."""
    medewerker = _personeel_service.get(medewerker_id)
    if not medewerker:
        return error_response('Personeelslid niet gevonden', 404)
    return jsonify(medewerker)


@personeel_bp.route('/api/personeel/<int:medewerker_id>/form', methods=['GET'])
@module_required('personeel')
def api_get_medewerker_form(medewerker_id):
    """API: Pre-filled edit form values."""
    values = _personeel_service.form_values(medewerker_id)
    if values is None:
        return error_response('Personeelslid niet gevonden', 404)
    return jsonify(values)


@personeel_bp.route('/api/personeel/<int:medewerker_id>', methods=['PUT'])
@module_required('personeel')
def api_update_medewerker(medewerker_id):
    """API: Update a staff member."""
    result = _personeel_service.update(medewerker_id, get_form_data(), form_post=not request.is_json)
    if not result.success:
        return error_response(result.error)
    return jsonify({'success': True, 'message': 'Personeelslid bijgewerkt'})


@personeel_bp.route('/api/personeel/<int:medewerker_id>', methods=['DELETE'])
@module_required('personeel')
def api_delete_medewerker(medewerker_id):
    """API: Delete a staff member."""
    _personeel_service.delete(medewerker_id)
    return jsonify({'success': True, 'message': 'Personeelslid verwijderd'})
