"""Entity package: Rental."""

from .entity import Rental, RentalPayload, RentalUpdatePayload, RentalView
from .repository import RentalRepository
from .table import RentalTable

__all__ = [
    "Rental",
    "RentalPayload",
    "RentalUpdatePayload",
    "RentalView",
    "RentalRepository",
    "RentalTable",
]
