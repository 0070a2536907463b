"""AutoHandel Documenten Module.

Document metadata for vehicles, staff, finance and legal files.
"""
from flask import Blueprint

from core.views import register_view

documenten_bp = Blueprint('documenten', __name__)

from . import routes  # noqa: E402, F401
from .services import DocumentService  # noqa: E402

register_view('documenten', lambda session, **filters: DocumentService().build_view(session, **filters))
