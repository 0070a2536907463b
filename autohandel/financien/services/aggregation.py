"""Read-side projections over repository snapshots.

Everything here is a pure function of the records passed in and is
recomputed on every view; nothing is cached.

The open-payments figures are static seed data. No invoice or payment entity
exists yet, so ``outstanding_payments_total`` sums that seed rather than a
ledger.
"""
from typing import Any, Dict, Iterable, List, Optional

OPEN_PAYMENTS = [
    {
        'klant': 'Johnson B.V.',
        'factuur_nummer': 'F-2024-0123',
        'bedrag': 8500,
        'vervaldatum': '2024-12-01',
        'dagen_over_tijd': 25,
    },
    {
        'klant': 'Smith Auto',
        'factuur_nummer': 'F-2024-0118',
        'bedrag': 4250,
        'vervaldatum': '2024-12-10',
        'dagen_over_tijd': 16,
    },
    {
        'klant': 'Van Der Berg',
        'factuur_nummer': 'F-2024-0130',
        'bedrag': 3000,
        'vervaldatum': '2024-12-20',
        'dagen_over_tijd': 6,
    },
]

SUMMONS = [
    {
        'datum': '2024-11-15',
        'klant': 'Probleem Klant B.V.',
        'bedrag': 12000,
        'status': 'in_behandeling',
        'juridische_kosten': 850,
    },
]

RECENT_COSTS = [
    {
        'datum': '2024-12-15',
        'beschrijving': 'Banden vervangen',
        'categorie': 'onderhoud',
        'bedrag': 320,
        'wagen': 'BMW 320d',
    },
    {
        'datum': '2024-12-14',
        'beschrijving': 'Administratiekosten',
        'categorie': 'administratie',
        'bedrag': 150,
        'wagen': None,
    },
]

COST_CATEGORIES = {
    'onderhoud': 5200,
    'administratie': 1800,
    'juridisch': 850,
}

ALERT_FIELDS = ('keuringen', 'documenten', 'betalingen', 'stock')


def _amount(value: Any) -> float:
    """Missing, empty or non-numeric amounts count as 0."""
    if value is None or value == '':
        return 0
    if isinstance(value, (int, float)):
        return value
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0


def vehicle_margin(wagen: Dict[str, Any]) -> Dict[str, float]:
    """Profit and margin percentage (one decimal) for one vehicle."""
    inkoop = _amount(wagen.get('inkoopprijs'))
    verkoop = _amount(wagen.get('verkoopprijs'))
    winst = verkoop - inkoop
    marge = round(winst / inkoop * 100, 1) if inkoop else 0
    return {'winst': winst, 'marge': marge}


def finance_summary(wagens: Iterable[Dict[str, Any]], kosten: Iterable[Dict[str, Any]]) -> Dict[str, float]:
    """Revenue, purchase cost and profit over sold vehicles, plus total costs.

    Costs are summed over every entry; there is no period filter.
    """
    verkocht = [w for w in wagens if w.get('status') == 'verkocht']
    totale_omzet = sum(_amount(w.get('verkoopprijs')) for w in verkocht)
    totale_inkoop = sum(_amount(w.get('inkoopprijs')) for w in verkocht)
    return {
        'totaleOmzet': totale_omzet,
        'totaleInkoop': totale_inkoop,
        'totaleWinst': totale_omzet - totale_inkoop,
        'totaleKosten': sum(_amount(k.get('bedrag')) for k in kosten),
    }


def profit_series(wagens: Iterable[Dict[str, Any]]) -> Dict[str, List]:
    """Chart series: label and profit per sold vehicle."""
    verkocht = [w for w in wagens if w.get('status') == 'verkocht']
    return {
        'labels': [f"{w.get('merk', '')} {w.get('model', '')}".strip() for w in verkocht],
        'winst': [vehicle_margin(w)['winst'] for w in verkocht],
    }


def outstanding_payments_total(payments: Iterable[Dict[str, Any]] = None) -> float:
    payments = OPEN_PAYMENTS if payments is None else payments
    return sum(_amount(p.get('bedrag')) for p in payments)


def dashboard_alerts(
    wagens: Iterable[Dict[str, Any]],
    documenten: Iterable[Dict[str, Any]],
    overrides: Optional[Dict[str, Any]] = None
) -> Dict[str, float]:
    """Dashboard alert figures; any non-zero override replaces the computed value."""
    wagens = list(wagens)
    alerts = {
        'keuringen': sum(1 for w in wagens if w.get('keuringsstatus') == 'rood'),
        'documenten': sum(1 for d in documenten if d.get('status') != 'compleet'),
        'betalingen': outstanding_payments_total(),
        'stock': sum(1 for w in wagens if w.get('status') == 'stock'),
    }
    for field in ALERT_FIELDS:
        value = (overrides or {}).get(field)
        if value:
            alerts[field] = value
    return alerts
