from loguru import logger

from booking_api.core.exceptions import ServiceNotFoundException
from booking_api.db.repositories.catalog import CatalogRepository
from booking_api.schemas import PriceQuote


class PricingService:
    def __init__(self, catalog_repo: CatalogRepository):
        self.catalog_repo = catalog_repo

    def quote(self, service_id: int, station_id: int) -> PriceQuote:
        resolved = self.catalog_repo.get_effective_price(service_id, station_id)
        if resolved is None:
            logger.warning(f"Service {service_id} not found")
            raise ServiceNotFoundException()

        service, price = resolved
        return PriceQuote(
            service_id=service.id,
            station_id=station_id,
            service_name=service.name,
            price=price,
        )
