from .personeel_service import PersoneelService, STAFF_DOCUMENTS

__all__ = ['PersoneelService', 'STAFF_DOCUMENTS']
