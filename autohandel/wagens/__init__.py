"""AutoHandel Wagens Module.

Vehicle inventory: create, edit, delete and filter vehicles.
"""
from flask import Blueprint

from core.views import register_view

wagens_bp = Blueprint('wagens', __name__)

from . import routes  # noqa: E402, F401
from .services import WagenService  # noqa: E402

register_view('wagens', lambda session, **filters: WagenService().build_view(session, **filters))
