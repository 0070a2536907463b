"""Cost Repository - append-only cost entries under ``kosten``."""
import logging
from typing import Any, Dict

from core.base_repository import EntityRepository
from core.exceptions import AutoHandelError

logger = logging.getLogger('autohandel.financien.cost_repository')


class CostRepository(EntityRepository):
    """Cost entries are only ever appended and read by the aggregator."""
    key = 'kosten'
    seed = []

    def add(self, entry: Dict[str, Any]) -> Dict[str, Any]:
        records = self.load_all()
        records.append(dict(entry))
        self.save_all(records)
        logger.info(f'Cost entry added: {entry.get("beschrijving")} ({entry.get("bedrag")})')
        return entry

    def create(self, record):
        return self.add(record)

    def update(self, record_id, mutator):
        raise AutoHandelError('Kostenposten kunnen niet gewijzigd worden')

    def remove(self, record_id):
        raise AutoHandelError('Kostenposten kunnen niet verwijderd worden')
