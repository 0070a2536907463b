"""Session Service - login, logout and restore of the single client session.

There is no credential check: any non-empty username/role/password triple
opens a session. At most one session exists per store and it never expires.
"""
import logging
from datetime import datetime
from typing import Optional

from core.exceptions import ValidationError
from core.storage import get_store
from ..models import Session

logger = logging.getLogger('autohandel.core.auth.session_service')

SESSION_KEY = 'currentUser'


class SessionService:

    def __init__(self, store=None):
        self._store = store

    @property
    def store(self):
        return self._store if self._store is not None else get_store()

    def login(self, username: str, role: str, password: str) -> Session:
        if not username or not role or not password:
            raise ValidationError('Vul alle velden in', fields=['username', 'password', 'role'])

        session = Session(
            username=username,
            role=role,
            login_time=datetime.now().isoformat(),
        )
        self.store.set(SESSION_KEY, session.to_dict())
        logger.info(f'User {username} logged in as {role}')
        return session

    def logout(self) -> None:
        self.store.delete(SESSION_KEY)
        logger.info('Session cleared')

    def restore(self) -> Optional[Session]:
        """Return the persisted session, if any."""
        return Session.from_dict(self.store.get(SESSION_KEY))
