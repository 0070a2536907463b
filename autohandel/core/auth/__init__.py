"""AutoHandel Core Authentication Module.

Handles the client session (login, logout, restore) and role-gated navigation.
"""
from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from . import routes  # noqa: E402, F401
