"""
AutoHandel Custom Exceptions
"""


class AutoHandelError(Exception):
    """Base exception for the back-office application."""
    pass


class ValidationError(AutoHandelError):
    """Raised when a required form field is missing or invalid."""
    def __init__(self, message: str, fields: list = None):
        self.fields = fields or []
        super().__init__(message)


class AccessDeniedError(AutoHandelError):
    """Raised when the session's role may not open a module."""
    def __init__(self, module: str, role: str = None):
        self.module = module
        self.role = role
        super().__init__('Geen toegang tot deze pagina')
