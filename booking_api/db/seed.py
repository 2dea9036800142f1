from decimal import Decimal

from loguru import logger
from sqlalchemy import text
from sqlalchemy.orm import Session

from carservice_shared.db.models import Base, Service, ServiceStation

from booking_api.config.logging import setup_logging
from booking_api.config.settings import Settings
from booking_api.db.database import get_engine, get_sessionmaker
from booking_api.db.repositories.catalog import CatalogRepository

STATIONS = [
    (1, "City Auto Care", "123 Main St, Cityville", "555-0101", "cityauto@example.com"),
    (2, "Premium Car Services", "456 Oak Ave, Townsville", "555-0102", "premium@example.com"),
]

SERVICES = [
    (1, "Oil Change", "Complete oil and filter change", Decimal("49.99"), 30),
    (2, "Tire Rotation", "Tire rotation and pressure check", Decimal("29.99"), 45),
    (3, "Brake Inspection", "Complete brake system inspection", Decimal("39.99"), 60),
    (4, "Engine Tune-Up", "Complete engine performance check", Decimal("89.99"), 90),
    (5, "Car Wash", "Full service car wash and vacuum", Decimal("24.99"), 45),
]

# (service_id, station_id) -> price
STATION_PRICES = {
    (1, 1): Decimal("49.99"),
    (2, 1): Decimal("29.99"),
    (3, 1): Decimal("39.99"),
    (4, 1): Decimal("89.99"),
    (5, 1): Decimal("24.99"),
    (1, 2): Decimal("54.99"),
    (2, 2): Decimal("34.99"),
    (3, 2): Decimal("44.99"),
    (4, 2): Decimal("94.99"),
    (5, 2): Decimal("29.99"),
}


def _sync_id_sequences(session: Session) -> None:
    # explicit ids leave postgres serial sequences behind
    if session.get_bind().dialect.name != "postgresql":
        return
    for table in ("service_stations", "services"):
        session.execute(
            text(
                f"SELECT setval(pg_get_serial_sequence('{table}', 'id'), "
                f"(SELECT MAX(id) FROM {table}))"
            )
        )


def seed_reference_data(session: Session) -> None:
    """Upserts the sample stations, services and station prices."""
    for station_id, name, address, phone, email in STATIONS:
        session.merge(
            ServiceStation(id=station_id, name=name, address=address, phone=phone, email=email)
        )

    for service_id, name, description, base_price, duration in SERVICES:
        session.merge(
            Service(
                id=service_id,
                name=name,
                description=description,
                base_price=base_price,
                duration_minutes=duration,
            )
        )
    session.flush()

    catalog_repo = CatalogRepository(session)
    for (service_id, station_id), price in STATION_PRICES.items():
        catalog_repo.set_override(service_id, station_id, price)

    _sync_id_sequences(session)

    logger.info(
        f"Reference data seeded: {len(STATIONS)} stations, {len(SERVICES)} services, "
        f"{len(STATION_PRICES)} station prices"
    )


def init_db(settings: Settings) -> None:
    Base.metadata.create_all(bind=get_engine(settings))

    session = get_sessionmaker(settings)()
    try:
        seed_reference_data(session)
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def main():
    settings = Settings()
    setup_logging(settings.log_level)
    init_db(settings)


if __name__ == "__main__":
    main()
