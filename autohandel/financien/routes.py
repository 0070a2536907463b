"""Financien Module Routes."""
from flask import jsonify, request
from flask_login import current_user

from . import financien_bp
from .services import FinanceService
from core.utils.api_helpers import module_required, get_form_data, error_response

_finance_service = FinanceService()


@financien_bp.route('/api/financien', methods=['GET'])
@module_required('financien')
def api_get_financien():
    """API: Finance page data."""
    return jsonify(_finance_service.build_view(current_user.session, periode=request.args.get('periode')))


@financien_bp.route('/api/financien/samenvatting', methods=['GET'])
@module_required('financien')
def api_get_summary():
    """API: Revenue/purchase/profit/cost totals."""
    return jsonify(_finance_service.summary())


@financien_bp.route('/api/financien/kosten', methods=['POST'])
@module_required('financien')
def api_add_cost():
    """API: Append a cost entry."""
    result = _finance_service.add_cost(get_form_data())
    if not result.success:
        return error_response(result.error)
    return jsonify({'success': True, 'kost': result.data})
