"""Meldingen Repositories Package."""
from .melding_repository import MeldingRepository

__all__ = ['MeldingRepository']
