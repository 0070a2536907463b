"""Finance Service - finance page and the append-only cost entries."""
import logging
from datetime import date
from typing import Any, Dict

from core.exceptions import ValidationError
from core.results import ServiceResult
from core.utils.form_helpers import clean_text, parse_float, require_fields
from wagens.repositories import WagenRepository
from ..repositories import CostRepository
from .aggregation import (
    COST_CATEGORIES,
    OPEN_PAYMENTS,
    RECENT_COSTS,
    SUMMONS,
    finance_summary,
    outstanding_payments_total,
    profit_series,
    vehicle_margin,
)

logger = logging.getLogger('autohandel.financien.service')

REQUIRED_COST_FIELDS = ('beschrijving', 'categorie', 'bedrag')


class FinanceService:
    """Service for finance views."""

    def __init__(self, wagen_repo: WagenRepository = None, cost_repo: CostRepository = None):
        self.wagen_repo = wagen_repo or WagenRepository()
        self.cost_repo = cost_repo or CostRepository()

    def summary(self) -> Dict[str, float]:
        return finance_summary(self.wagen_repo.load_all(), self.cost_repo.load_all())

    def add_cost(self, data: Dict[str, Any]) -> ServiceResult:
        """Append a cost entry. Entries are never edited or removed."""
        try:
            require_fields(data, REQUIRED_COST_FIELDS)
            bedrag = parse_float(data.get('bedrag'))
            if bedrag is None:
                raise ValidationError('Ongeldig bedrag', fields=['bedrag'])
        except ValidationError as e:
            return ServiceResult(success=False, error=str(e))

        entry = self.cost_repo.add({
            'datum': clean_text(data.get('datum')) or date.today().isoformat(),
            'beschrijving': clean_text(data.get('beschrijving')),
            'categorie': clean_text(data.get('categorie')),
            'bedrag': bedrag,
            'wagen': clean_text(data.get('wagen')),
        })
        return ServiceResult(success=True, data=entry)

    def build_view(self, session=None, periode: str = None, **_) -> Dict[str, Any]:
        """Finance page payload.

        ``periode`` is accepted for the period selector but does not filter
        anything; every figure covers all stored data.
        """
        wagens = self.wagen_repo.load_all()
        summary = finance_summary(wagens, self.cost_repo.load_all())
        return {
            **summary,
            'periode': periode,
            'openstaandeBedragen': outstanding_payments_total(),
            'wagenWinsten': [
                dict(
                    id=w.get('id'),
                    wagen=f"{w.get('merk', '')} {w.get('model', '')}".strip(),
                    stocknummer=w.get('stocknummer'),
                    status=w.get('status'),
                    inkoopprijs=w.get('inkoopprijs'),
                    verkoopprijs=w.get('verkoopprijs'),
                    **vehicle_margin(w),
                )
                for w in wagens
            ],
            'winstGrafiek': profit_series(wagens),
            'kostenCategorieen': {'inkoop': summary['totaleInkoop'], **COST_CATEGORIES},
            'recenteKosten': list(RECENT_COSTS),
            'openstaandeBetalingen': list(OPEN_PAYMENTS),
            'dagvaardingen': list(SUMMONS),
        }
