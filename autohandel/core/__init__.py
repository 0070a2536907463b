"""AutoHandel Core Platform Module.

Shared infrastructure used by every back-office module:
- Storage abstraction (primary key-value backend with local fallback)
- Whole-collection entity repositories
- Session handling and role-based module access
- Logging, error helpers and the page view registry
"""
