from typing import List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.orm import Session

from carservice_shared.db.models import ServiceStation, User


class StationRepository:
    def __init__(self, session: Session):
        self.session = session

    def list_with_admins(
        self,
    ) -> List[Tuple[ServiceStation, Optional[str], Optional[str]]]:
        """Stations ordered by name, with the admin's name and email when set."""
        rows = self.session.execute(
            select(ServiceStation, User.name, User.email)
            .outerjoin(User, ServiceStation.admin_id == User.id)
            .order_by(ServiceStation.name)
        ).all()
        return [(row[0], row[1], row[2]) for row in rows]

    def get_name(self, station_id: int) -> Optional[str]:
        return self.session.execute(
            select(ServiceStation.name).where(ServiceStation.id == station_id)
        ).scalar_one_or_none()
