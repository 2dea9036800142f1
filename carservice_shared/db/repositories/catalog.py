from decimal import Decimal
from typing import List, Optional, Tuple

from loguru import logger
from sqlalchemy import and_, delete, func, select
from sqlalchemy.orm import Session

from carservice_shared.db.models import Service, ServicePricing

_EFFECTIVE_PRICE = func.coalesce(ServicePricing.price, Service.base_price)


def _as_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class CatalogRepository:
    def __init__(self, session: Session):
        self.session = session

    # --- Services ---

    def list_services(self) -> List[Service]:
        return list(
            self.session.execute(select(Service).order_by(Service.name)).scalars().all()
        )

    # --- Station pricing ---

    def _pricing_join(self, station_id: int):
        return and_(
            ServicePricing.service_id == Service.id,
            ServicePricing.station_id == station_id,
        )

    def get_effective_price(
        self, service_id: int, station_id: int
    ) -> Optional[Tuple[Service, Decimal]]:
        """
        Returns the service with its price at the station: the station override
        when one exists, otherwise the base price. None if the service is unknown.
        """
        row = self.session.execute(
            select(Service, _EFFECTIVE_PRICE)
            .outerjoin(ServicePricing, self._pricing_join(station_id))
            .where(Service.id == service_id)
        ).first()
        if row is None:
            return None
        return row[0], _as_decimal(row[1])

    def list_services_for_station(
        self, station_id: int
    ) -> List[Tuple[Service, Decimal]]:
        rows = self.session.execute(
            select(Service, _EFFECTIVE_PRICE)
            .outerjoin(ServicePricing, self._pricing_join(station_id))
            .order_by(Service.name)
        ).all()
        return [(row[0], _as_decimal(row[1])) for row in rows]

    def get_override(self, service_id: int, station_id: int) -> Optional[ServicePricing]:
        return self.session.execute(
            select(ServicePricing).where(
                ServicePricing.service_id == service_id,
                ServicePricing.station_id == station_id,
            )
        ).scalar_one_or_none()

    def set_override(self, service_id: int, station_id: int, price: Decimal) -> None:
        pricing = self.get_override(service_id, station_id)
        if pricing:
            pricing.price = price
        else:
            self.session.add(
                ServicePricing(service_id=service_id, station_id=station_id, price=price)
            )
        self.session.flush()
        logger.debug(
            "Set price override for service {} at station {}: {}",
            service_id,
            station_id,
            price,
        )

    def delete_override(self, service_id: int, station_id: int) -> bool:
        result = self.session.execute(
            delete(ServicePricing).where(
                ServicePricing.service_id == service_id,
                ServicePricing.station_id == station_id,
            )
        )
        return result.rowcount > 0
