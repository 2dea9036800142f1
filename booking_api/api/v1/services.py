from typing import List

from fastapi import APIRouter, Depends
from loguru import logger

from booking_api.api.dependencies import get_catalog_service
from booking_api.core.exceptions import server_error_exception
from booking_api.schemas import ServiceResponse, StationResponse, StationServiceResponse
from booking_api.services.catalog import CatalogService

router = APIRouter()


@router.get("/services/stations", response_model=List[StationResponse])
def list_stations(catalog_service: CatalogService = Depends(get_catalog_service)):
    try:
        return catalog_service.list_stations()
    except Exception as e:
        logger.exception(f"Error fetching stations: {e}")
        raise server_error_exception()


@router.get("/services/station/{station_id}", response_model=List[StationServiceResponse])
def list_station_services(
    station_id: int,
    catalog_service: CatalogService = Depends(get_catalog_service),
):
    try:
        return catalog_service.list_station_services(station_id)
    except Exception as e:
        logger.exception(f"Error fetching services of station {station_id}: {e}")
        raise server_error_exception()


@router.get("/services", response_model=List[ServiceResponse])
def list_services(catalog_service: CatalogService = Depends(get_catalog_service)):
    try:
        return catalog_service.list_services()
    except Exception as e:
        logger.exception(f"Error fetching services: {e}")
        raise server_error_exception()
