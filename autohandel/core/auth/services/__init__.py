from .session_service import SessionService, SESSION_KEY

__all__ = ['SessionService', 'SESSION_KEY']
