from typing import Optional

from carservice_shared.db.models import User
from carservice_shared.db.repositories.station import StationRepository
from carservice_shared.db.repositories.user import UserRepository as SharedUserRepository

from booking_api.schemas import UserResponse


class UserRepository(SharedUserRepository):
    def to_user_data(self, user: User) -> UserResponse:
        """Public view of a user: no password hash, with the station name if any."""
        station_name: Optional[str] = None
        if user.service_station_id is not None:
            station_name = StationRepository(self.session).get_name(
                user.service_station_id
            )

        return UserResponse(
            id=user.id,
            email=user.email,
            name=user.name,
            phone=user.phone,
            role=user.role,
            service_station_id=user.service_station_id,
            station_name=station_name,
            created_at=user.created_at,
        )


__all__ = ["UserRepository"]
