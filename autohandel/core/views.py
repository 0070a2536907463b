"""
Page view registry.

Each module registers a builder that turns the current repository state into
the JSON payload for its page. ``render_page`` gates the page by role and
rebuilds the payload from storage on every call.
"""
import logging
from typing import Any, Callable, Dict, Optional

from core.exceptions import AccessDeniedError
from core.roles import MODULE_KEYS

logger = logging.getLogger('autohandel.core.views')

_VIEW_BUILDERS: Dict[str, Callable[..., Dict[str, Any]]] = {}


def register_view(module: str, builder: Callable[..., Dict[str, Any]]):
    """Register ``builder(session, **filters)`` as the view for ``module``."""
    if module not in MODULE_KEYS:
        raise ValueError(f'Unknown module: {module}')
    _VIEW_BUILDERS[module] = builder


def render_page(session, page: str, filters: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Build the view for ``page`` or raise AccessDeniedError.

    ``filters`` are free-form query parameters; a ``session`` key among them is
    dropped because the builder receives the acting session positionally.
    """
    if page not in _VIEW_BUILDERS or not session.has_access(page):
        raise AccessDeniedError(page, session.role)
    filters = {k: v for k, v in (filters or {}).items() if k != 'session'}
    logger.debug(f'Rendering {page} for {session.username}')
    return _VIEW_BUILDERS[page](session, **filters)
