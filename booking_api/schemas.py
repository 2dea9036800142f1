from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from booking_api.core.status import BookingStatus


# --- Auth ---


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)
    name: str
    phone: Optional[str] = None
    role: Literal["client", "station_admin"] = "client"
    service_station_id: Optional[int] = None


class LoginRequest(BaseModel):
    # not EmailStr: a malformed address is just another unknown email
    email: str
    password: str


class UserResponse(BaseModel):
    id: int
    email: str
    name: str
    phone: Optional[str] = None
    role: str
    service_station_id: Optional[int] = None
    station_name: Optional[str] = None
    created_at: Optional[datetime] = None


class AuthResponse(BaseModel):
    message: str
    user: UserResponse
    token: str


# --- Catalog ---


class StationResponse(BaseModel):
    id: int
    name: str
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    admin_id: Optional[int] = None
    admin_name: Optional[str] = None
    admin_email: Optional[str] = None


class ServiceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    base_price: float
    duration_minutes: int


class StationServiceResponse(ServiceResponse):
    price: float = Field(description="Price at the station: override or base price")


# --- Bookings ---


class CreateBookingRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    service_id: int = Field(alias="serviceId")
    station_id: int = Field(alias="stationId")
    client_id: int = Field(alias="clientId")
    booking_date: date = Field(alias="date")
    booking_time: time = Field(alias="time")
    special_instructions: Optional[str] = Field(None, alias="specialInstructions")


class UpdateBookingStatusRequest(BaseModel):
    status: BookingStatus


class BookingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    client_id: int
    service_id: int
    station_id: int
    booking_date: date
    booking_time: time
    final_price: float
    status: BookingStatus
    quotation_text: Optional[str] = None
    special_instructions: Optional[str] = None
    created_at: datetime


class BookingDetailsResponse(BookingResponse):
    service_name: str
    station_name: str


class BookingEnvelope(BaseModel):
    message: str
    booking: BookingResponse


# --- Misc ---


class RootResponse(BaseModel):
    message: str
    timestamp: datetime


class HealthResponse(BaseModel):
    status: str = "OK"
    timestamp: datetime
    database: str = "Connected"


class ChatFrame(BaseModel):
    event: str
    data: Any = None


# Internal schemas for services
class PriceQuote(BaseModel):
    service_id: int
    station_id: int
    service_name: str
    price: Decimal

