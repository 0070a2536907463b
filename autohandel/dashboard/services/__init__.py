from .dashboard_service import DashboardService, ALERTS_KEY

__all__ = ['DashboardService', 'ALERTS_KEY']
