"""Shared API utilities: decorators, error helpers and request parsing."""
import logging
from functools import wraps

from flask import jsonify, request
from flask_login import current_user

from core.exceptions import AccessDeniedError, ValidationError
from core.utils.logging_config import log_with_context

logger = logging.getLogger('autohandel.api')

ACCESS_DENIED_MESSAGE = 'Geen toegang tot deze pagina'


# ============== Decorators ==============

def api_login_required(f):
    """Like @login_required but returns JSON 401 instead of redirect."""
    @wraps(f)
    def decorated(*args, **kwargs):
        if not current_user.is_authenticated:
            return jsonify({'success': False, 'error': 'Authentication required'}), 401
        return f(*args, **kwargs)
    return decorated


def module_required(module: str):
    """Decorator requiring a session whose role may open ``module``.

    Usage:
        @wagens_bp.route('/api/wagens')
        @module_required('wagens')
        def api_get_wagens():
            ...
    """
    def decorator(f):
        @wraps(f)
        def decorated(*args, **kwargs):
            if not current_user.is_authenticated:
                return jsonify({'success': False, 'error': 'Authentication required'}), 401
            if not current_user.has_access(module):
                log_with_context(
                    logger, logging.INFO, 'Access denied',
                    username=current_user.username, role=current_user.role, module=module,
                )
                return jsonify({'success': False, 'error': ACCESS_DENIED_MESSAGE}), 403
            return f(*args, **kwargs)
        return decorated
    return decorator


# ============== Request Validation ==============

def get_form_data():
    """Get the submitted form as a plain dict, from a JSON body or a form post."""
    if request.is_json:
        return request.get_json(silent=True) or {}
    return request.form.to_dict()


def get_filters(*names):
    """Collect non-empty query-string filters by name."""
    return {name: request.args.get(name) for name in names if request.args.get(name)}


# ============== Error Handling ==============

def error_response(message, status_code=400):
    """Return a standard JSON error response."""
    return jsonify({'success': False, 'error': message}), status_code


def safe_error_response(e, status_code=500):
    """Return error response without leaking storage internals.

    - ValidationError/ValueError/KeyError: returns str(e) as 400 (safe to expose)
    - AccessDeniedError: 403 with the denial message
    - Everything else: logs full exception, returns generic message
    """
    if isinstance(e, AccessDeniedError):
        return jsonify({'success': False, 'error': str(e)}), 403
    if isinstance(e, (ValidationError, ValueError, KeyError)):
        return jsonify({'success': False, 'error': str(e)}), 400

    logger.exception('Unhandled error in API route')
    return jsonify({'success': False, 'error': 'An internal error occurred'}), status_code
