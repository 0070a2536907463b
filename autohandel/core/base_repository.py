"""Base Repository: whole-collection persistence for one storage key.

Every entity type (wagens, medewerkers, documenten, meldingen, kosten) is
stored as a single JSON array under its own key. Each write is
load-all / mutate-in-memory / save-all; there is no partial update and no
locking, so the last ``save_all`` wins.

Usage:
    class ThingRepository(EntityRepository):
        key = 'things'
        seed = [{'id': 1, 'name': 'Default thing'}]

    repo = ThingRepository()
    thing = repo.create({'name': 'New thing'})
    repo.update(thing['id'], lambda t: t.update(name='Renamed'))
    repo.remove(thing['id'])
"""
import copy
import logging
import time
from typing import Any, Callable, Dict, List, Optional

from core.storage import get_store

logger = logging.getLogger('autohandel.repository')


def next_id(records: List[Dict[str, Any]]) -> int:
    """Return a fresh id: creation time in ms, bumped past the highest existing id."""
    now_ms = int(time.time() * 1000)
    existing = [r.get('id') for r in records if isinstance(r.get('id'), int)]
    if existing:
        return max(now_ms, max(existing) + 1)
    return now_ms


def same_id(left: Any, right: Any) -> bool:
    """Compare ids loosely; ids arrive as int from storage and as str from forms."""
    if left is None or right is None:
        return False
    return str(left) == str(right)


class EntityRepository:
    key: str = None
    seed: List[Dict[str, Any]] = []

    def __init__(self, store=None):
        self._store = store

    @property
    def store(self):
        return self._store if self._store is not None else get_store()

    def load_all(self) -> List[Dict[str, Any]]:
        """Read the collection; an empty or absent collection yields the built-in seed."""
        records = self.store.get(self.key) or []
        if not records:
            return copy.deepcopy(self.seed)
        return records

    def save_all(self, records: List[Dict[str, Any]]) -> None:
        self.store.set(self.key, records)
        logger.debug(f'Saved {len(records)} records under {self.key!r}')

    def get_by_id(self, record_id) -> Optional[Dict[str, Any]]:
        for record in self.load_all():
            if same_id(record.get('id'), record_id):
                return record
        return None

    def create(self, record: Dict[str, Any]) -> Dict[str, Any]:
        """Append a record with a freshly generated id and persist the collection."""
        records = self.load_all()
        new_record = dict(record)
        new_record['id'] = next_id(records)
        records.append(new_record)
        self.save_all(records)
        logger.info(f'Created {self.key} record {new_record["id"]}')
        return new_record

    def update(self, record_id, mutator: Callable[[Dict[str, Any]], Any]) -> Optional[Dict[str, Any]]:
        """Apply ``mutator`` in place to the first record with ``record_id``.

        Silently does nothing (and writes nothing) when the id is absent.
        """
        records = self.load_all()
        for record in records:
            if same_id(record.get('id'), record_id):
                mutator(record)
                self.save_all(records)
                return record
        logger.debug(f'Update skipped: {self.key} record {record_id} not found')
        return None

    def remove(self, record_id) -> bool:
        """Drop every record with ``record_id``. Returns whether anything was removed."""
        records = self.load_all()
        remaining = [r for r in records if not same_id(r.get('id'), record_id)]
        if len(remaining) == len(records):
            logger.debug(f'Remove skipped: {self.key} record {record_id} not found')
            return False
        self.save_all(remaining)
        logger.info(f'Removed {self.key} record {record_id}')
        return True
