"""AutoHandel Financien Module.

Revenue, profit and margin figures derived from the vehicle inventory,
plus append-only cost entries.
"""
from flask import Blueprint

from core.views import register_view

financien_bp = Blueprint('financien', __name__)

from . import routes  # noqa: E402, F401
from .services import FinanceService  # noqa: E402

register_view('financien', lambda session, **filters: FinanceService().build_view(session, **filters))
