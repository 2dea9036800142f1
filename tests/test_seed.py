from decimal import Decimal

from sqlalchemy import func, select

from carservice_shared.db.models import Service, ServicePricing, ServiceStation

from booking_api.db.repositories.catalog import CatalogRepository
from booking_api.db.seed import STATION_PRICES, seed_reference_data


def _count(session, model) -> int:
    return session.execute(select(func.count()).select_from(model)).scalar_one()


def test_seed_is_idempotent(SessionLocal):
    for _ in range(2):
        with SessionLocal() as s:
            seed_reference_data(s)
            s.commit()

    with SessionLocal() as s:
        assert _count(s, ServiceStation) == 2
        assert _count(s, Service) == 5
        assert _count(s, ServicePricing) == len(STATION_PRICES)


def test_seeded_prices_resolve_per_station(SessionLocal):
    with SessionLocal() as s:
        seed_reference_data(s)
        s.commit()

    with SessionLocal() as s:
        repo = CatalogRepository(s)
        assert repo.get_effective_price(1, 1)[1] == Decimal("49.99")
        assert repo.get_effective_price(1, 2)[1] == Decimal("54.99")
        assert repo.get_effective_price(4, 2)[1] == Decimal("94.99")
