"""AutoHandel Auth Models.

Session value persisted under ``currentUser`` and the Flask-Login user
wrapped around it.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from flask_login import UserMixin

from core.roles import has_access


@dataclass
class Session:
    """The logged-in user: who, in which role, since when."""
    username: str
    role: str
    login_time: str

    def has_access(self, module: str) -> bool:
        return has_access(self.role, module)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'username': self.username,
            'role': self.role,
            'loginTime': self.login_time,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional['Session']:
        if not isinstance(data, dict):
            return None
        if not data.get('username') or not data.get('role'):
            return None
        return cls(
            username=data['username'],
            role=data['role'],
            login_time=data.get('loginTime', ''),
        )


class User(UserMixin):
    """User class for Flask-Login."""

    def __init__(self, session: Session):
        self.session = session
        self.id = session.username
        self.username = session.username
        self.role = session.role

    def has_access(self, module: str) -> bool:
        return self.session.has_access(module)
