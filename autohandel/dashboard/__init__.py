"""AutoHandel Dashboard Module."""
from flask import Blueprint

from core.views import register_view

dashboard_bp = Blueprint('dashboard', __name__)

from . import routes  # noqa: E402, F401
from .services import DashboardService  # noqa: E402

register_view('dashboard', lambda session, **filters: DashboardService().build_view(session, **filters))
