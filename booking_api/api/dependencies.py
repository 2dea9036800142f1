from functools import lru_cache
from typing import Optional

from fastapi import Depends, WebSocket
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from booking_api.chat.rooms import ChatRoomManager
from booking_api.config.settings import Settings
from booking_api.core.exceptions import invalid_token_exception
from booking_api.db.database import get_sessionmaker
from booking_api.db.repositories.booking import BookingRepository
from booking_api.db.repositories.catalog import CatalogRepository
from booking_api.db.repositories.station import StationRepository
from booking_api.db.repositories.user import UserRepository
from booking_api.services.auth import AuthService
from booking_api.services.booking import BookingService
from booking_api.services.catalog import CatalogService
from booking_api.services.pricing import PricingService

bearer_scheme = HTTPBearer(auto_error=False)


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def get_session(settings: Settings = Depends(get_settings)) -> Session:
    sessionmaker = get_sessionmaker(settings)
    session = sessionmaker()
    try:
        yield session
    finally:
        session.close()


def get_user_repository(session: Session = Depends(get_session)) -> UserRepository:
    return UserRepository(session)


def get_station_repository(session: Session = Depends(get_session)) -> StationRepository:
    return StationRepository(session)


def get_catalog_repository(session: Session = Depends(get_session)) -> CatalogRepository:
    return CatalogRepository(session)


def get_booking_repository(session: Session = Depends(get_session)) -> BookingRepository:
    return BookingRepository(session)


def get_pricing_service(
    catalog_repo: CatalogRepository = Depends(get_catalog_repository),
) -> PricingService:
    return PricingService(catalog_repo)


def get_catalog_service(
    station_repo: StationRepository = Depends(get_station_repository),
    catalog_repo: CatalogRepository = Depends(get_catalog_repository),
) -> CatalogService:
    return CatalogService(station_repo, catalog_repo)


def get_booking_service(
    booking_repo: BookingRepository = Depends(get_booking_repository),
    station_repo: StationRepository = Depends(get_station_repository),
    pricing_service: PricingService = Depends(get_pricing_service),
) -> BookingService:
    return BookingService(booking_repo, station_repo, pricing_service)


def get_auth_service(
    user_repo: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    return AuthService(user_repo, settings)


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> str:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise invalid_token_exception()
    return credentials.credentials


def get_chat_rooms(websocket: WebSocket) -> ChatRoomManager:
    return websocket.app.state.chat_rooms
