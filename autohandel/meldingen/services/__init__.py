from .melding_service import MeldingService, time_until

__all__ = ['MeldingService', 'time_until']
