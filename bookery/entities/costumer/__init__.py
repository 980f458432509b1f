"""Entity package: Costumer."""

from .entity import Costumer, CostumerPayload, CostumerUpdatePayload
from .repository import CostumerRepository
from .table import CostumerTable

__all__ = [
    "Costumer",
    "CostumerPayload",
    "CostumerUpdatePayload",
    "CostumerRepository",
    "CostumerTable",
]
