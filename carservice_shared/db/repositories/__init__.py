from .booking import BookingRepository
from .catalog import CatalogRepository
from .station import StationRepository
from .user import UserRepository

__all__ = [
    "UserRepository",
    "StationRepository",
    "CatalogRepository",
    "BookingRepository",
]
