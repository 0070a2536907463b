"""Wagen Repository - vehicle inventory under the ``wagens`` key."""
from typing import Any, Dict, List, Optional

from core.base_repository import EntityRepository
from core.utils.form_helpers import text_matches

SEARCHABLE_FIELDS = (
    'merk', 'model', 'stocknummer', 'chassisnummer', 'nummerplaat',
    'kleur', 'brandstof', 'transmissie', 'bouwjaar', 'status', 'keuringsstatus',
)


class WagenRepository(EntityRepository):
    """Repository for vehicle records."""
    key = 'wagens'
    seed = [
        {
            'id': 1,
            'merk': 'BMW',
            'model': '320d',
            'stocknummer': 'BMW001',
            'chassisnummer': 'WBAVA31070PT09876',
            'nummerplaat': '1-ABC-123',
            'bouwjaar': 2020,
            'kleur': 'Zwart',
            'kmstand': 45000,
            'brandstof': 'Diesel',
            'transmissie': 'Automaat',
            'vermogen': 140,
            'status': 'stock',
            'keuringsstatus': 'groen',
            'inkoopprijs': 25000,
            'verkoopprijs': 32000,
            'oldtimer': False,
            'lichte_vracht': False,
            'documenten': {
                'aankoop': {'compleet': True},
                'verkoop': {'compleet': False},
                'garantie': {'compleet': True},
            },
        },
        {
            'id': 2,
            'merk': 'Mercedes',
            'model': 'A180',
            'stocknummer': 'MER001',
            'chassisnummer': 'WDD1760291J123456',
            'nummerplaat': '2-DEF-456',
            'bouwjaar': 2019,
            'kleur': 'Wit',
            'kmstand': 32000,
            'brandstof': 'Benzine',
            'transmissie': 'Handgeschakeld',
            'vermogen': 100,
            'status': 'consignatie',
            'keuringsstatus': 'rood',
            'inkoopprijs': 22000,
            'verkoopprijs': 28000,
            'oldtimer': False,
            'lichte_vracht': False,
            'documenten': {
                'aankoop': {'compleet': False},
                'verkoop': {'compleet': False},
                'garantie': {'compleet': False},
            },
        },
    ]

    def filter(
        self,
        status: Optional[str] = None,
        keuringsstatus: Optional[str] = None,
        type: Optional[str] = None,
        q: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """Vehicles matching every given filter, in stored order.

        ``type`` is one of personenwagen (neither oldtimer nor light truck),
        oldtimer or lichte_vracht.
        """
        result = []
        for wagen in self.load_all():
            if status and wagen.get('status') != status:
                continue
            if keuringsstatus and wagen.get('keuringsstatus') != keuringsstatus:
                continue
            if type == 'oldtimer' and not wagen.get('oldtimer'):
                continue
            if type == 'lichte_vracht' and not wagen.get('lichte_vracht'):
                continue
            if type == 'personenwagen' and (wagen.get('oldtimer') or wagen.get('lichte_vracht')):
                continue
            if q and not text_matches(wagen, q, SEARCHABLE_FIELDS):
                continue
            result.append(wagen)
        return result
