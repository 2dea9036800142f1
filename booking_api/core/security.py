from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any, Dict

import jwt
from jwt import PyJWTError
from loguru import logger
from passlib.context import CryptContext

from booking_api.config.settings import Settings
from booking_api.core.exceptions import InvalidTokenException


@lru_cache()
def _password_context(rounds: int) -> CryptContext:
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


def hash_password(password: str, rounds: int = 12) -> str:
    return str(_password_context(rounds).hash(password))


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return bool(_password_context(12).verify(plain_password, hashed_password))
    except (ValueError, TypeError) as e:
        logger.error(f"Error verifying password: {e}")
        return False


def create_access_token(data: Dict[str, Any], settings: Settings) -> str:
    """
    Signs `data` into a JWT that expires after the configured number of hours.
    """
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + timedelta(
        hours=settings.access_token_expire_hours
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings) -> Dict[str, Any]:
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except PyJWTError as e:
        logger.warning(f"Rejected access token: {e}")
        raise InvalidTokenException() from e
