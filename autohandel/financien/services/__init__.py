from .aggregation import (
    vehicle_margin,
    finance_summary,
    dashboard_alerts,
    profit_series,
    outstanding_payments_total,
)
from .finance_service import FinanceService

__all__ = [
    'vehicle_margin',
    'finance_summary',
    'dashboard_alerts',
    'profit_series',
    'outstanding_payments_total',
    'FinanceService',
]
