from datetime import datetime, timezone
from typing import List, Optional, Tuple

from loguru import logger
from sqlalchemy import select
from sqlalchemy.orm import Session

from carservice_shared.db.models import Booking, Service, ServiceStation


class BookingRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, booking_id: int) -> Optional[Booking]:
        return self.session.get(Booking, booking_id)

    def create_booking(self, booking: Booking) -> Booking:
        if booking.created_at is None:
            booking.created_at = datetime.now(timezone.utc)
        self.session.add(booking)
        self.session.flush()
        return booking

    def list_for_client(self, client_id: int) -> List[Tuple[Booking, str, str]]:
        """Client's bookings with service and station names, newest first."""
        rows = self.session.execute(
            select(Booking, Service.name, ServiceStation.name)
            .join(Service, Booking.service_id == Service.id)
            .join(ServiceStation, Booking.station_id == ServiceStation.id)
            .where(Booking.client_id == client_id)
            .order_by(Booking.created_at.desc(), Booking.id.desc())
        ).all()
        return [(row[0], row[1], row[2]) for row in rows]

    def update_status(self, booking_id: int, status: str) -> Optional[Booking]:
        booking = self.get_by_id(booking_id)
        if not booking:
            return None

        old_status = booking.status
        booking.status = status
        self.session.flush()
        logger.debug(f"Booking {booking_id} status: {old_status} -> {status}")
        return booking
