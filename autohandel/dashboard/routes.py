"""Dashboard Module Routes."""
from flask import jsonify
from flask_login import current_user

from . import dashboard_bp
from .services import DashboardService
from core.utils.api_helpers import module_required

_dashboard_service = DashboardService()


@dashboard_bp.route('/api/dashboard', methods=['GET'])
@module_required('dashboard')
def api_get_dashboard():
    """API: Dashboard tiles, quick actions and recent activity."""
    return jsonify(_dashboard_service.build_view(current_user.session))


@dashboard_bp.route('/api/dashboard/alerts', methods=['GET'])
@module_required('dashboard')
def api_get_alerts():
    """API: Alert figures only."""
    return jsonify(_dashboard_service.alerts())
