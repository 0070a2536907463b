"""AutoHandel storage package.

Exposes the process-wide KVStore. The store is built lazily from the
configuration: a PostgreSQL primary when DATABASE_URL is set, always backed by
the local fallback file.
"""
import logging
import threading

from config import get_config
from .kv_store import KVStore
from .backends import LocalStore, PostgresKVBackend

logger = logging.getLogger('autohandel.storage')

_store = None
_store_lock = threading.Lock()


def build_store(config=None) -> KVStore:
    """Create a KVStore from configuration."""
    config = config or get_config()
    fallback = LocalStore(config.LOCAL_STORE_PATH, prefix=config.LOCAL_KEY_PREFIX)
    primary = None
    if config.has_primary_backend:
        primary = PostgresKVBackend()
        logger.info('Storage: PostgreSQL primary with local fallback')
    else:
        logger.info(f'Storage: local store only ({config.LOCAL_STORE_PATH})')
    return KVStore(fallback=fallback, primary=primary)


def get_store() -> KVStore:
    """Get or create the shared store (lazy initialization, thread-safe)."""
    global _store
    if _store is None:
        with _store_lock:
            if _store is None:
                _store = build_store()
    return _store


def configure_store(store: KVStore):
    """Replace the shared store (used at startup and in tests)."""
    global _store
    _store = store


__all__ = [
    'KVStore',
    'LocalStore',
    'PostgresKVBackend',
    'build_store',
    'get_store',
    'configure_store',
]
