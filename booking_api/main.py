import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from booking_api.api.dependencies import get_settings
from booking_api.api.v1 import auth, bookings, chat, health, services
from booking_api.chat.rooms import ChatRoomManager
from booking_api.config.logging import setup_logging
from booking_api.db.seed import init_db
from booking_api.monitoring.metrics import init_app_info, setup_instrumentator

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting car service API")

    settings = get_settings()
    if settings.init_db:
        init_db(settings)

    yield
    logger.info("Shutting down car service API")


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Car Service API",
        description="Booking API for car service stations",
        version=VERSION,
        lifespan=lifespan,
    )
    app.state.chat_rooms = ChatRoomManager()

    instrumentator = setup_instrumentator()
    instrumentator.instrument(app).expose(app)

    init_app_info(VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"({elapsed_ms:.1f} ms)"
        )
        return response

    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(auth.router, prefix="/api", tags=["auth"])
    app.include_router(services.router, prefix="/api", tags=["services"])
    app.include_router(bookings.router, prefix="/api", tags=["bookings"])
    app.include_router(chat.router, tags=["chat"])

    return app


def main():
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "booking_api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


app = create_app()


if __name__ == "__main__":
    main()
