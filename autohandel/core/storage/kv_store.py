"""Storage abstraction over a primary key-value backend and a local fallback.

Best-effort by contract: any error from the primary backend is logged and the
operation is repeated against the fallback. Nothing is raised to the caller, so
"no value" and "both backends failed" both read as ``None``.
"""
import logging
from typing import Any, Optional

logger = logging.getLogger('autohandel.storage')


class KVStore:
    """Uniform get/set/delete over a named key."""

    def __init__(self, fallback, primary=None):
        self.primary = primary
        self.fallback = fallback

    def get(self, key: str) -> Optional[Any]:
        try:
            if self.primary is not None:
                return self.primary.get(key)
            return self.fallback.get(key)
        except Exception as e:
            logger.warning(f'Storage get failed for {key!r}, using fallback: {e}')
            return self._fallback_call('get', key)

    def set(self, key: str, value: Any) -> None:
        try:
            if self.primary is not None:
                self.primary.set(key, value)
            else:
                self.fallback.set(key, value)
        except Exception as e:
            logger.warning(f'Storage set failed for {key!r}, using fallback: {e}')
            self._fallback_call('set', key, value)

    def delete(self, key: str) -> None:
        try:
            if self.primary is not None:
                self.primary.delete(key)
            else:
                self.fallback.delete(key)
        except Exception as e:
            logger.warning(f'Storage delete failed for {key!r}, using fallback: {e}')
            self._fallback_call('delete', key)

    def _fallback_call(self, op: str, *args):
        try:
            return getattr(self.fallback, op)(*args)
        except Exception:
            logger.exception(f'Fallback storage {op} failed for {args[0]!r}')
            return None
