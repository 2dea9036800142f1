from typing import List

from carservice_shared.db.repositories.station import (
    StationRepository as SharedStationRepository,
)

from booking_api.schemas import StationResponse


class StationRepository(SharedStationRepository):
    def list_station_data(self) -> List[StationResponse]:
        return [
            StationResponse(
                id=station.id,
                name=station.name,
                address=station.address,
                phone=station.phone,
                email=station.email,
                admin_id=station.admin_id,
                admin_name=admin_name,
                admin_email=admin_email,
            )
            for station, admin_name, admin_email in self.list_with_admins()
        ]


__all__ = ["StationRepository"]
