"""Role-based module access."""
from .permissions import MODULES, MODULE_KEYS, ROLE_MODULES, has_access, accessible_modules

__all__ = ['MODULES', 'MODULE_KEYS', 'ROLE_MODULES', 'has_access', 'accessible_modules']
