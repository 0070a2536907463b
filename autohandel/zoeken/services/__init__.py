from .search_service import SearchService, SearchResult, MIN_QUERY_LENGTH

__all__ = ['SearchService', 'SearchResult', 'MIN_QUERY_LENGTH']
