"""Auth module routes.

Login/logout, session restore, navigation and role-gated page views.
"""
from flask import jsonify, request
from flask_login import login_user, logout_user, current_user

from . import auth_bp
from .models import User
from .services import SessionService
from core.exceptions import AutoHandelError
from core.roles import accessible_modules
from core.views import render_page
from core.utils.api_helpers import api_login_required, get_form_data, error_response, safe_error_response

_session_service = SessionService()


@auth_bp.route('/api/login', methods=['POST'])
def api_login():
    """API: Open a session for any non-empty username/password/role."""
    data = get_form_data()
    try:
        session = _session_service.login(
            username=(data.get('username') or '').strip(),
            role=data.get('role') or '',
            password=data.get('password') or '',
        )
    except AutoHandelError as e:
        return error_response(str(e))

    login_user(User(session))
    return jsonify({'success': True, 'message': 'Succesvol ingelogd', 'session': session.to_dict()})


@auth_bp.route('/api/logout', methods=['POST'])
def api_logout():
    """API: Clear the session."""
    _session_service.logout()
    logout_user()
    return jsonify({'success': True, 'message': 'Uitgelogd'})


@auth_bp.route('/api/session', methods=['GET'])
def api_get_session():
    """API: Return the persisted session, if one exists."""
    session = _session_service.restore()
    if session is None:
        return jsonify({'success': True, 'session': None})
    if not current_user.is_authenticated:
        login_user(User(session))
    return jsonify({'success': True, 'session': session.to_dict()})


@auth_bp.route('/api/navigation', methods=['GET'])
@api_login_required
def api_navigation():
    """API: Modules visible to the current role."""
    return jsonify({'success': True, 'modules': accessible_modules(current_user.role)})


@auth_bp.route('/api/pages/<page>', methods=['GET'])
@api_login_required
def api_show_page(page):
    """API: Render a page if the current role may open it."""
    try:
        view = render_page(current_user.session, page, request.args.to_dict())
    except AutoHandelError as e:
        return safe_error_response(e)
    return jsonify({'success': True, 'page': page, 'view': view})
