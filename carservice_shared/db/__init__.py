from .database import get_engine, get_sessionmaker
from .models import Base, Booking, Service, ServicePricing, ServiceStation, User

__all__ = [
    "Base",
    "User",
    "ServiceStation",
    "Service",
    "ServicePricing",
    "Booking",
    "get_sessionmaker",
    "get_engine",
]
