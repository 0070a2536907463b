"""Personeel Repositories Package."""
from .medewerker_repository import MedewerkerRepository

__all__ = ['MedewerkerRepository']
