from typing import List

from carservice_shared.db.repositories.catalog import (
    CatalogRepository as SharedCatalogRepository,
)

from booking_api.schemas import ServiceResponse, StationServiceResponse


class CatalogRepository(SharedCatalogRepository):
    def list_service_data(self) -> List[ServiceResponse]:
        return [ServiceResponse.model_validate(s) for s in self.list_services()]

    def list_station_service_data(self, station_id: int) -> List[StationServiceResponse]:
        return [
            StationServiceResponse(
                **ServiceResponse.model_validate(service).model_dump(),
                price=price,
            )
            for service, price in self.list_services_for_station(station_id)
        ]


__all__ = ["CatalogRepository"]
