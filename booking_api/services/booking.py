from datetime import date, datetime, time, timezone
from decimal import Decimal
from typing import List

from loguru import logger

from carservice_shared.db.models import Booking

from booking_api.core.exceptions import (
    BookingNotFoundException,
    InvalidStatusTransitionException,
    StationNotFoundException,
)
from booking_api.core.status import BookingStatus, can_transition, is_terminal
from booking_api.db.repositories.booking import BookingRepository
from booking_api.db.repositories.station import StationRepository
from booking_api.schemas import (
    BookingDetailsResponse,
    BookingResponse,
    CreateBookingRequest,
)
from booking_api.services.pricing import PricingService


def build_quotation_text(
    service_name: str,
    station_name: str,
    booking_date: date,
    booking_time: time,
    total: Decimal,
) -> str:
    return (
        "Service Booking Quotation:\n"
        f"Service: {service_name}\n"
        f"Station: {station_name}\n"
        f"Date: {booking_date.isoformat()}\n"
        f"Time: {booking_time.strftime('%H:%M')}\n"
        f"Total: ${total:.2f}"
    )


class BookingService:
    def __init__(
        self,
        booking_repo: BookingRepository,
        station_repo: StationRepository,
        pricing_service: PricingService,
    ):
        self.booking_repo = booking_repo
        self.station_repo = station_repo
        self.pricing_service = pricing_service

    def create_booking(self, request: CreateBookingRequest) -> BookingResponse:
        logger.info(
            f"Creating booking for client {request.client_id}: "
            f"service {request.service_id} at station {request.station_id}"
        )

        quote = self.pricing_service.quote(request.service_id, request.station_id)

        station_name = self.station_repo.get_name(request.station_id)
        if station_name is None:
            logger.warning(f"Station {request.station_id} not found")
            raise StationNotFoundException()

        quotation_text = build_quotation_text(
            quote.service_name,
            station_name,
            request.booking_date,
            request.booking_time,
            quote.price,
        )

        booking = Booking(
            client_id=request.client_id,
            service_id=request.service_id,
            station_id=request.station_id,
            booking_date=request.booking_date,
            booking_time=request.booking_time,
            final_price=quote.price,
            status=BookingStatus.PENDING.value,
            quotation_text=quotation_text,
            special_instructions=request.special_instructions,
            created_at=datetime.now(timezone.utc),
        )
        self.booking_repo.create_booking(booking)

        logger.info(f"Booking {booking.id} created with final price {quote.price}")
        return BookingResponse.model_validate(booking)

    def list_client_bookings(self, client_id: int) -> List[BookingDetailsResponse]:
        return self.booking_repo.list_client_bookings(client_id)

    def update_status(self, booking_id: int, target: BookingStatus) -> BookingResponse:
        booking = self.booking_repo.get_by_id(booking_id)
        if not booking:
            logger.error(f"Booking {booking_id} not found")
            raise BookingNotFoundException()

        current = BookingStatus(booking.status)
        if not can_transition(current, target):
            if is_terminal(current):
                logger.warning(
                    f"Booking {booking_id} is already {current.value}, "
                    f"cannot move to {target.value}"
                )
            else:
                logger.warning(
                    f"Rejected status change for booking {booking_id}: "
                    f"{current.value} -> {target.value}"
                )
            raise InvalidStatusTransitionException(current.value, target.value)

        updated = self.booking_repo.update_status(booking_id, target.value)
        return BookingResponse.model_validate(updated)
