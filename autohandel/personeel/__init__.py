"""AutoHandel Personeel Module.

Staff records and their HR document checklist.
"""
from flask import Blueprint

from core.views import register_view

personeel_bp = Blueprint('personeel', __name__)

from . import routes  # noqa: E402, F401
from .services import PersoneelService  # noqa: E402

register_view('personeel', lambda session, **filters: PersoneelService().build_view(session, **filters))
