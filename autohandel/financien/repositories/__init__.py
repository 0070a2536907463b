from .cost_repository import CostRepository

__all__ = ['CostRepository']
