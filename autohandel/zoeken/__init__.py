"""AutoHandel Zoeken Module.

Global search over vehicles, staff and reminders.
"""
from flask import Blueprint

from core.views import register_view

zoeken_bp = Blueprint('zoeken', __name__)

from . import routes  # noqa: E402, F401
from .services import SearchService  # noqa: E402

register_view('zoeken', lambda session, **filters: SearchService().build_view(session, **filters))
