from functools import lru_cache

from carservice_shared.db.database import get_engine as shared_get_engine
from carservice_shared.db.database import get_sessionmaker as shared_get_sessionmaker

from booking_api.config.settings import Settings


@lru_cache()
def _sessionmaker_for(database_url: str):
    return shared_get_sessionmaker(database_url)


def get_sessionmaker(settings: Settings):
    return _sessionmaker_for(settings.database_url)


def get_engine(settings: Settings):
    return shared_get_engine(settings.database_url)
