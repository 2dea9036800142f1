from prometheus_client import Counter, Info
from prometheus_fastapi_instrumentator import Instrumentator

# Business metrics
bookings_total = Counter(
    "car_service_bookings_total",
    "Total number of booking creation attempts",
    ["result"],  # result=created/not_found/error
)

booking_status_changes_total = Counter(
    "car_service_booking_status_changes_total",
    "Total number of accepted booking status changes",
    ["status"],  # status=confirmed/in_progress/completed/cancelled
)

registrations_total = Counter(
    "car_service_registrations_total",
    "Total number of registration attempts",
    ["result"],  # result=created/conflict/error
)

logins_total = Counter(
    "car_service_logins_total",
    "Total number of login attempts",
    ["result"],  # result=success/invalid/error
)

chat_messages_total = Counter(
    "car_service_chat_messages_total",
    "Total number of chat messages relayed",
)

# Application info
app_info = Info("car_service_app_info", "Application information")


def setup_instrumentator() -> Instrumentator:
    return Instrumentator(
        should_group_status_codes=False,
        should_ignore_untemplated=True,
        should_respect_env_var=False,
        should_instrument_requests_inprogress=True,
        excluded_handlers=["/metrics", "/api/health"],
        inprogress_name="http_requests_inprogress",
        inprogress_labels=True,
    )


def init_app_info(version: str = "1.0.0"):
    app_info.info({"version": version, "service": "car-service-api", "component": "api"})
