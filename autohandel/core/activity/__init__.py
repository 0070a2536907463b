"""Recent activity feed shown on the dashboard."""
from .activity_repository import ActivityRepository

__all__ = ['ActivityRepository']
