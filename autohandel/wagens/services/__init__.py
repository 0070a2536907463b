from .wagen_service import WagenService, DOCUMENT_CHECKLISTS

__all__ = ['WagenService', 'DOCUMENT_CHECKLISTS']
