"""Melding Repository - reminders under the ``meldingen`` key."""
from typing import Any, Dict, List, Optional

from core.base_repository import EntityRepository


class MeldingRepository(EntityRepository):
    """Repository for reminder records."""
    key = 'meldingen'
    seed = [
        {
            'id': 1,
            'titel': 'Keuring vervalt binnenkort - BMW 320d',
            'beschrijving': 'De keuring van de BMW 320d (stocknummer BMW001) verloopt over 5 dagen.',
            'type': 'keuring',
            'prioriteit': 'hoog',
            'status': 'open',
            'vervaldatum': '2024-12-31',
            'toegewezen_aan': 'Jan Janssen',
            'gerelateerd_item': 'BMW 320d (BMW001)',
        },
        {
            'id': 2,
            'titel': 'Documenten ontbreken - Mercedes A180',
            'beschrijving': 'Aankoopbordel en marge-attest nog niet ontvangen.',
            'type': 'documenten',
            'prioriteit': 'normaal',
            'status': 'open',
            'vervaldatum': '2025-01-05',
            'toegewezen_aan': 'Marie Pieters',
            'gerelateerd_item': 'Mercedes A180 (MER001)',
        },
        {
            'id': 3,
            'titel': 'Openstaande betaling Johnson B.V.',
            'beschrijving': 'Factuur F-2024-0123 voor €8.500 is 25 dagen over tijd.',
            'type': 'betaling',
            'prioriteit': 'hoog',
            'status': 'open',
            'vervaldatum': '2024-12-01',
            'toegewezen_aan': 'Administratie',
            'gerelateerd_item': 'Factuur F-2024-0123',
        },
    ]

    def filter(
        self,
        type: Optional[str] = None,
        prioriteit: Optional[str] = None,
        status: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        return [
            m for m in self.load_all()
            if (not type or m.get('type') == type)
            and (not prioriteit or m.get('prioriteit') == prioriteit)
            and (not status or m.get('status') == status)
        ]

    def mark_all_read(self, username: str, timestamp: str) -> int:
        """Stamp every open reminder as read. Returns how many were stamped."""
        meldingen = self.load_all()
        count = 0
        for melding in meldingen:
            if melding.get('status') == 'open':
                melding['gelezen'] = True
                melding['gelezen_door'] = username
                melding['gelezen_op'] = timestamp
                count += 1
        self.save_all(meldingen)
        return count
