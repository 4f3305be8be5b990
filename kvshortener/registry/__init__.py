from kvshortener.registry.url_registry import UrlRegistry
from kvshortener.registry.counting import RedirectCounting, EmbeddedCounting, CellCounting
from kvshortener.registry.results import ListResult, SearchResult, LockResult, BulkDeleteResult


__all__ = [
    'UrlRegistry',
    'RedirectCounting',
    'EmbeddedCounting',
    'CellCounting',
    'ListResult',
    'SearchResult',
    'LockResult',
    'BulkDeleteResult',
]
