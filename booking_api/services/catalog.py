from typing import List

from booking_api.db.repositories.catalog import CatalogRepository
from booking_api.db.repositories.station import StationRepository
from booking_api.schemas import ServiceResponse, StationResponse, StationServiceResponse


class CatalogService:
    def __init__(self, station_repo: StationRepository, catalog_repo: CatalogRepository):
        self.station_repo = station_repo
        self.catalog_repo = catalog_repo

    def list_stations(self) -> List[StationResponse]:
        return self.station_repo.list_station_data()

    def list_station_services(self, station_id: int) -> List[StationServiceResponse]:
        return self.catalog_repo.list_station_service_data(station_id)

    def list_services(self) -> List[ServiceResponse]:
        return self.catalog_repo.list_service_data()
