from typing import List

from carservice_shared.db.repositories.booking import (
    BookingRepository as SharedBookingRepository,
)

from booking_api.schemas import BookingDetailsResponse, BookingResponse


class BookingRepository(SharedBookingRepository):
    def list_client_bookings(self, client_id: int) -> List[BookingDetailsResponse]:
        return [
            BookingDetailsResponse(
                **BookingResponse.model_validate(booking).model_dump(),
                service_name=service_name,
                station_name=station_name,
            )
            for booking, service_name, station_name in self.list_for_client(client_id)
        ]


__all__ = ["BookingRepository"]
