from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from carservice_shared.db.models import User


class UserRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.session.get(User, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        return self.session.execute(
            select(User).where(User.email == email)
        ).scalar_one_or_none()

    def email_exists(self, email: str) -> bool:
        return self.get_by_email(email) is not None

    def create_user(
        self,
        email: str,
        password_hash: str,
        name: str,
        phone: Optional[str] = None,
        role: str = "client",
        service_station_id: Optional[int] = None,
    ) -> User:
        user = User(
            email=email,
            password_hash=password_hash,
            name=name,
            phone=phone,
            role=role,
            service_station_id=service_station_id,
        )
        self.session.add(user)
        self.session.flush()
        return user
