from typing import Tuple

from loguru import logger
from sqlalchemy.exc import IntegrityError

from carservice_shared.db.models import User

from booking_api.config.settings import Settings
from booking_api.core.exceptions import (
    InvalidCredentialsException,
    InvalidTokenException,
    UserAlreadyExistsException,
)
from booking_api.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from booking_api.db.repositories.user import UserRepository
from booking_api.schemas import LoginRequest, RegisterRequest, UserResponse


class AuthService:
    def __init__(self, user_repo: UserRepository, settings: Settings):
        self.user_repo = user_repo
        self.settings = settings

    def _issue_token(self, user: User) -> str:
        return create_access_token(
            {"user_id": user.id, "email": user.email, "role": user.role},
            self.settings,
        )

    def register(self, request: RegisterRequest) -> Tuple[UserResponse, str]:
        if self.user_repo.email_exists(request.email):
            logger.info(f"Registration rejected, email already in use: {request.email}")
            raise UserAlreadyExistsException()

        try:
            user = self.user_repo.create_user(
                email=request.email,
                password_hash=hash_password(request.password, self.settings.bcrypt_rounds),
                name=request.name,
                phone=request.phone,
                role=request.role,
                service_station_id=request.service_station_id,
            )
        except IntegrityError:
            logger.info(f"Registration lost race on unique email: {request.email}")
            raise UserAlreadyExistsException()

        logger.info(f"User {user.id} registered with role {user.role}")
        return self.user_repo.to_user_data(user), self._issue_token(user)

    def login(self, request: LoginRequest) -> Tuple[UserResponse, str]:
        user = self.user_repo.get_by_email(request.email)
        # same error for unknown email and wrong password
        if not user or not verify_password(request.password, user.password_hash):
            logger.info(f"Failed login attempt for {request.email}")
            raise InvalidCredentialsException()

        logger.info(f"User {user.id} logged in")
        return self.user_repo.to_user_data(user), self._issue_token(user)

    def get_current_user(self, token: str) -> UserResponse:
        payload = decode_access_token(token, self.settings)

        user_id = payload.get("user_id")
        if not isinstance(user_id, int):
            raise InvalidTokenException()

        user = self.user_repo.get_by_id(user_id)
        if not user:
            logger.warning(f"Token references unknown user {user_id}")
            raise InvalidTokenException()

        return self.user_repo.to_user_data(user)
