from fastapi import APIRouter, Depends
from loguru import logger
from sqlalchemy.orm import Session

from booking_api.api.dependencies import get_auth_service, get_bearer_token, get_session
from booking_api.core.exceptions import (
    InvalidCredentialsException,
    InvalidTokenException,
    UserAlreadyExistsException,
    invalid_credentials_exception,
    invalid_token_exception,
    server_error_exception,
    user_already_exists_exception,
)
from booking_api.monitoring.metrics import logins_total, registrations_total
from booking_api.schemas import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from booking_api.services.auth import AuthService

router = APIRouter()


@router.post("/auth/register", response_model=AuthResponse, status_code=201)
def register(
    request: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
    session: Session = Depends(get_session),
):
    try:
        user, token = auth_service.register(request)
        session.commit()
        registrations_total.labels(result="created").inc()
        return AuthResponse(message="User registered successfully", user=user, token=token)
    except UserAlreadyExistsException:
        session.rollback()
        registrations_total.labels(result="conflict").inc()
        raise user_already_exists_exception()
    except Exception as e:
        session.rollback()
        registrations_total.labels(result="error").inc()
        logger.exception(f"Registration error: {e}")
        raise server_error_exception("Server error during registration")


@router.post("/auth/login", response_model=AuthResponse)
def login(
    request: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    try:
        user, token = auth_service.login(request)
        logins_total.labels(result="success").inc()
        return AuthResponse(message="Login successful", user=user, token=token)
    except InvalidCredentialsException:
        logins_total.labels(result="invalid").inc()
        raise invalid_credentials_exception()
    except Exception as e:
        logins_total.labels(result="error").inc()
        logger.exception(f"Login error: {e}")
        raise server_error_exception("Server error during login")


@router.get("/auth/me", response_model=UserResponse)
def me(
    token: str = Depends(get_bearer_token),
    auth_service: AuthService = Depends(get_auth_service),
):
    try:
        return auth_service.get_current_user(token)
    except InvalidTokenException:
        raise invalid_token_exception()
