"""Meldingen Module Routes."""
from flask import jsonify
from flask_login import current_user

from . import meldingen_bp
from .services import MeldingService
from core.utils.api_helpers import module_required, get_form_data, get_filters, error_response

_melding_service = MeldingService()


@meldingen_bp.route('/api/meldingen', methods=['GET'])
@module_required('meldingen')
def api_get_meldingen():
    """API: Reminder list, optionally filtered by type, prioriteit and status."""
    filters = get_filters('type', 'prioriteit', 'status')
    return jsonify(_melding_service.build_view(current_user.session, **filters))


@meldingen_bp.route('/api/meldingen', methods=['POST'])
@module_required('meldingen')
def api_create_melding():
    """API: Create a reminder."""
    result = _melding_service.create(get_form_data(), session=current_user.session)
    if not result.success:
        return error_response(result.error)
    return jsonify({'success': True, 'message': 'Herinnering succesvol aangemaakt', 'melding': result.data})


@meldingen_bp.route('/api/meldingen/<int:melding_id>', methods=['PUT'])
@module_required('meldingen')
def api_update_melding(melding_id):
    """API: Update a reminder."""
    result = _melding_service.update(melding_id, get_form_data())
    if not result.success:
        return error_response(result.error)
    return jsonify({'success': True, 'message': 'Herinnering bijgewerkt'})


@meldingen_bp.route('/api/meldingen/<int:melding_id>/voltooid', methods=['POST'])
@module_required('meldingen')
def api_complete_melding(melding_id):
    """API: Mark a reminder as completed."""
    _melding_service.complete(melding_id, current_user.session)
    return jsonify({'success': True, 'message': 'Melding gemarkeerd als voltooid'})


@meldingen_bp.route('/api/meldingen/gelezen', methods=['POST'])
@module_required('meldingen')
def api_mark_all_read():
    """API: Mark every open reminder as read."""
    result = _melding_service.mark_all_read(current_user.session)
    return jsonify({'success': True, 'message': 'Alle meldingen gemarkeerd als gelezen', **result.data})


@meldingen_bp.route('/api/meldingen/<int:melding_id>', methods=['DELETE'])
@module_required('meldingen')
def api_delete_melding(melding_id):
    """API: Delete a reminder."""
    _melding_service.delete(melding_id)
    return jsonify({'success': True, 'message': 'Melding verwijderd'})
