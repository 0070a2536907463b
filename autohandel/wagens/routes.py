"""Wagens Module Routes."""
from flask import jsonify, request
from flask_login import current_user

from . import wagens_bp
from .services import WagenService
from core.utils.api_helpers import module_required, get_form_data, get_filters, error_response

_wagen_service = WagenService()


@wagens_bp.route('/api/wagens', methods=['GET'])
@module_required('wagens')
def api_get_wagens():
    """API: Vehicle list, optionally filtered by status, keuringsstatus, type and q."""
    filters = get_filters('status', 'keuringsstatus', 'type', 'q')
    return jsonify(_wagen_service.build_view(current_user.session, **filters))


@wagens_bp.route('/api/wagens', methods=['POST'])
@module_required('wagens')
def api_create_wagen():
    """API: Create a vehicle."""
    result = _wagen_service.create(get_form_data(), session=current_user.session)
    if not result.success:
        return error_response(result.error)
    return jsonify({'success': True, 'message': 'Wagen succesvol toegevoegd', 'wagen': result.data})


@wagens_bp.route('/api/wagens/<int:wagen_id>', methods=['GET'])
@module_required('wagens')
def api_get_wagen(wagen_id):
    """API: Vehicle details."""
    wagen = _wagen_service.get(wagen_id)
    if not wagen:
        return error_response('Wagen niet gevonden', 404)
    return jsonify(wagen)


@wagens_bp.route('/api/wagens/<int:wagen_id>/form', methods=['GET'])
@module_required('wagens')
def api_get_wagen_form(wagen_id):
    """API: Pre-filled edit form values."""
    values = _wagen_service.form_values(wagen_id)
    if values is None:
        return error_response('Wagen niet gevonden', 404)
    return jsonify(values)


@wagens_bp.route('/api/wagens/<int:wagen_id>', methods=['PUT'])
@module_required('wagens')
def api_update_wagen(wagen_id):
    """API: Update a vehicle."""
    result = _wagen_service.update(wagen_id, get_form_data(), form_post=not request.is_json)
    if not result.success:
        return error_response(result.error)
    return jsonify({'success': True, 'message': 'Wagen bijgewerkt'})


@wagens_bp.route('/api/wagens/<int:wagen_id>', methods=['DELETE'])
@module_required('wagens')
def api_delete_wagen(wagen_id):
    """API: Delete a vehicle."""
    _wagen_service.delete(wagen_id)
    return jsonify({'success': True, 'message': 'Wagen verwijderd'})
