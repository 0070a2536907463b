import sys
import os
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from flask import Flask, request, jsonify

from config import get_config

# Structured logging
from core.utils.logging_config import setup_logging, get_logger
config = get_config()
logger = setup_logging(level=config.LOG_LEVEL, json_format=config.JSON_LOGS or None)
app_logger = get_logger('autohandel.app')
app_logger.info('AutoHandel app module loading...')

from flask_compress import Compress
from flask_login import LoginManager
from core.auth.models import User
from core.auth.services import SessionService

_session_service = SessionService()


app = Flask(__name__)

# Secret key: required in production, dev fallback only under FLASK_DEBUG or TESTING
_secret_key = config.SECRET_KEY
if not _secret_key:
    if config.DEBUG or os.environ.get('TESTING'):
        _secret_key = 'dev-secret-key-for-local-only'
        app_logger.warning('Using development secret key, set FLASK_SECRET_KEY for production')
    else:
        raise RuntimeError('FLASK_SECRET_KEY environment variable is required')
app.secret_key = _secret_key

compress = Compress()
compress.init_app(app)

login_manager = LoginManager()
login_manager.init_app(app)

app.config['SESSION_COOKIE_HTTPONLY'] = True
app.config['SESSION_COOKIE_SAMESITE'] = 'Lax'

# ============== Primary Storage ==============

if config.has_primary_backend:
    try:
        from database import init_kv_table
        init_kv_table()
    except Exception as e:
        # Storage falls back to the local store per operation
        app_logger.warning(f'Primary storage unavailable at startup: {e}')

# ============== Blueprint Registrations ==============

from core.auth import auth_bp
app.register_blueprint(auth_bp)

from dashboard import dashboard_bp
app.register_blueprint(dashboard_bp)

from wagens import wagens_bp
app.register_blueprint(wagens_bp)

from personeel import personeel_bp
app.register_blueprint(personeel_bp)

from documenten import documenten_bp
app.register_blueprint(documenten_bp)

from financien import financien_bp
app.register_blueprint(financien_bp)

from meldingen import meldingen_bp
app.register_blueprint(meldingen_bp)

from zoeken import zoeken_bp
app.register_blueprint(zoeken_bp)

app_logger.info(f'AutoHandel startup complete: {len(app.url_map._rules)} routes registered')

# ============== Global Error Handlers ==============

@app.errorhandler(404)
def handle_404(e):
    return jsonify({'success': False, 'error': 'Not found'}), 404


@app.errorhandler(405)
def handle_405(e):
    return jsonify({'success': False, 'error': 'Method not allowed'}), 405


@app.errorhandler(500)
def handle_500(e):
    app_logger.exception(f'Unhandled 500 error on {request.path}')
    return jsonify({'success': False, 'error': 'An internal error occurred'}), 500


# ============== Flask-Login ==============

@login_manager.user_loader
def load_user(user_id):
    """Restore the user from the persisted session, if it still belongs to them."""
    session = _session_service.restore()
    if session and session.username == user_id:
        return User(session)
    return None


@login_manager.unauthorized_handler
def unauthorized():
    return jsonify({'success': False, 'error': 'Authentication required'}), 401


@app.route('/health')
def health():
    return jsonify({'status': 'ok', 'primary_storage': config.has_primary_backend})


if __name__ == '__main__':
    app.run(debug=config.DEBUG, port=int(os.environ.get('PORT', '5000')))
