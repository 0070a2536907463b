from .document_service import DocumentService, format_file_size

__all__ = ['DocumentService', 'format_file_size']
