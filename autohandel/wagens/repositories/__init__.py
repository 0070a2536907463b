"""Wagens Repositories Package."""
from .wagen_repository import WagenRepository

__all__ = ['WagenRepository']
