from typing import List

from fastapi import APIRouter, Depends
from loguru import logger
from sqlalchemy.orm import Session

from booking_api.api.dependencies import get_booking_service, get_session
from booking_api.core.exceptions import (
    BookingNotFoundException,
    InvalidStatusTransitionException,
    ServiceNotFoundException,
    StationNotFoundException,
    booking_not_found_exception,
    invalid_status_transition_exception,
    server_error_exception,
    service_not_found_exception,
    station_not_found_exception,
)
from booking_api.monitoring.metrics import booking_status_changes_total, bookings_total
from booking_api.schemas import (
    BookingDetailsResponse,
    BookingEnvelope,
    CreateBookingRequest,
    UpdateBookingStatusRequest,
)
from booking_api.services.booking import BookingService

router = APIRouter()


@router.post("/bookings", response_model=BookingEnvelope, status_code=201)
def create_booking(
    request: CreateBookingRequest,
    booking_service: BookingService = Depends(get_booking_service),
    session: Session = Depends(get_session),
):
    try:
        booking = booking_service.create_booking(request)
        session.commit()
        bookings_total.labels(result="created").inc()
        return BookingEnvelope(message="Booking created successfully", booking=booking)
    except ServiceNotFoundException:
        session.rollback()
        bookings_total.labels(result="not_found").inc()
        raise service_not_found_exception()
    except StationNotFoundException:
        session.rollback()
        bookings_total.labels(result="not_found").inc()
        raise station_not_found_exception()
    except Exception as e:
        session.rollback()
        bookings_total.labels(result="error").inc()
        logger.exception(f"Booking error: {e}")
        raise server_error_exception("Server error during booking")


@router.get("/bookings/user/{user_id}", response_model=List[BookingDetailsResponse])
def get_user_bookings(
    user_id: int,
    booking_service: BookingService = Depends(get_booking_service),
):
    try:
        return booking_service.list_client_bookings(user_id)
    except Exception as e:
        logger.exception(f"Error fetching bookings of user {user_id}: {e}")
        raise server_error_exception()


@router.put("/bookings/{booking_id}/status", response_model=BookingEnvelope)
def update_booking_status(
    booking_id: int,
    request: UpdateBookingStatusRequest,
    booking_service: BookingService = Depends(get_booking_service),
    session: Session = Depends(get_session),
):
    try:
        booking = booking_service.update_status(booking_id, request.status)
        session.commit()
        booking_status_changes_total.labels(status=request.status.value).inc()
        return BookingEnvelope(
            message="Booking status updated successfully", booking=booking
        )
    except BookingNotFoundException:
        session.rollback()
        raise booking_not_found_exception()
    except InvalidStatusTransitionException as e:
        session.rollback()
        raise invalid_status_transition_exception(e)
    except Exception as e:
        session.rollback()
        logger.exception(f"Error updating status of booking {booking_id}: {e}")
        raise server_error_exception()
