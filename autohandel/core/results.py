"""Service result type shared by the module services."""
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class ServiceResult:
    """Result of a service operation."""
    success: bool
    data: Any = None
    error: Optional[str] = None
