"""Activity Repository - newest-first feed under ``recent_activities``."""
import logging
from datetime import datetime
from typing import Any, Dict, List

from config import get_config
from core.base_repository import EntityRepository

logger = logging.getLogger('autohandel.core.activity')


class ActivityRepository(EntityRepository):
    key = 'recent_activities'
    seed = [
        {
            'icon': 'fa-car',
            'description': 'Nieuwe wagen toegevoegd: BMW 320d',
            'time': '2 uur geleden',
        },
        {
            'icon': 'fa-file-alt',
            'description': 'Document geüpload voor Mercedes A180',
            'time': '4 uur geleden',
        },
        {
            'icon': 'fa-euro-sign',
            'description': 'Betaling ontvangen van klant Johnson',
            'time': '1 dag geleden',
        },
    ]

    def record(self, icon: str, description: str, username: str = None) -> Dict[str, Any]:
        """Prepend an entry and trim the feed to the configured length.

        Only stored entries are kept; the built-in seed is display-only.
        """
        entry = {
            'icon': icon,
            'description': description,
            'time': datetime.now().isoformat(timespec='seconds'),
        }
        if username:
            entry['door'] = username
        stored = self.store.get(self.key) or []
        feed = [entry] + stored
        self.save_all(feed[:get_config().RECENT_ACTIVITY_LIMIT])
        return entry

    def recent(self) -> List[Dict[str, Any]]:
        return self.load_all()
