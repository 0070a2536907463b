"""AutoHandel Meldingen Module.

Reminders for inspections, documents, payments, maintenance and leave.
"""
from flask import Blueprint

from core.views import register_view

meldingen_bp = Blueprint('meldingen', __name__)

from . import routes  # noqa: E402, F401
from .services import MeldingService  # noqa: E402

register_view('meldingen', lambda session, **filters: MeldingService().build_view(session, **filters))
