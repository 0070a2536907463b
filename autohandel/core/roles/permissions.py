"""
Module registry and role → module access table.

The access check is a client-side convenience gate, not a security boundary:
roles are chosen at login and never verified against a trusted store.
"""

# Navigation modules in display order
MODULES = [
    {'module_key': 'dashboard', 'name': 'Dashboard', 'icon': 'fa-tachometer-alt', 'sort_order': 1},
    {'module_key': 'wagens', 'name': 'Wagenbeheer', 'icon': 'fa-car', 'sort_order': 2},
    {'module_key': 'personeel', 'name': 'Personeel', 'icon': 'fa-users', 'sort_order': 3},
    {'module_key': 'documenten', 'name': 'Documenten', 'icon': 'fa-file-alt', 'sort_order': 4},
    {'module_key': 'financien', 'name': 'Financiën', 'icon': 'fa-euro-sign', 'sort_order': 5},
    {'module_key': 'meldingen', 'name': 'Meldingen', 'icon': 'fa-bell', 'sort_order': 6},
    {'module_key': 'zoeken', 'name': 'Zoeken', 'icon': 'fa-search', 'sort_order': 7},
]

MODULE_KEYS = [m['module_key'] for m in MODULES]

ROLE_MODULES = {
    'admin': frozenset({'dashboard', 'wagens', 'personeel', 'documenten', 'financien', 'meldingen', 'zoeken'}),
    'verkoper': frozenset({'dashboard', 'wagens', 'documenten', 'zoeken'}),
    'administratie': frozenset({'dashboard', 'documenten', 'financien', 'meldingen'}),
    'personeel': frozenset({'dashboard', 'personeel'}),
}


def has_access(role: str, module: str) -> bool:
    """Check whether ``role`` may open ``module``. Unknown roles get nothing."""
    return module in ROLE_MODULES.get(role, frozenset())


def accessible_modules(role: str) -> list[dict]:
    """Navigation entries visible to ``role``, in display order."""
    return [dict(m) for m in MODULES if has_access(role, m['module_key'])]
