"""Zoeken Module Routes."""
from flask import jsonify, request
from flask_login import current_user

from . import zoeken_bp
from .services import SearchService
from core.utils.api_helpers import module_required

_search_service = SearchService()


@zoeken_bp.route('/api/zoeken', methods=['GET'])
@module_required('zoeken')
def api_search():
    """API: Global search; queries shorter than 3 characters return no results."""
    return jsonify(_search_service.build_view(current_user.session, q=request.args.get('q', '')))
