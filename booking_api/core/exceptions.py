from fastapi import HTTPException


class CarServiceException(Exception):
    pass


class ServiceNotFoundException(CarServiceException):
    pass


class StationNotFoundException(CarServiceException):
    pass


class BookingNotFoundException(CarServiceException):
    pass


class UserAlreadyExistsException(CarServiceException):
    pass


class InvalidCredentialsException(CarServiceException):
    pass


class InvalidTokenException(CarServiceException):
    pass


class InvalidStatusTransitionException(CarServiceException):
    def __init__(self, current: str, target: str):
        self.current = current
        self.target = target
        super().__init__(f"Cannot change booking status from {current} to {target}")


def service_not_found_exception():
    return HTTPException(status_code=404, detail="Service not found")


def station_not_found_exception():
    return HTTPException(status_code=404, detail="Service station not found")


def booking_not_found_exception():
    return HTTPException(status_code=404, detail="Booking not found")


def user_already_exists_exception():
    return HTTPException(status_code=400, detail="User already exists")


def invalid_credentials_exception():
    return HTTPException(status_code=400, detail="Invalid credentials")


def invalid_token_exception():
    return HTTPException(
        status_code=401,
        detail="Invalid or expired token",
        headers={"WWW-Authenticate": "Bearer"},
    )


def invalid_status_transition_exception(exc: InvalidStatusTransitionException):
    return HTTPException(status_code=400, detail=str(exc))


def server_error_exception(detail: str = "Server error"):
    return HTTPException(status_code=500, detail=detail)
