import logging
import os


def _base_url(name: str, default: str) -> str:
    return os.getenv(name, default).strip().rstrip("/")


# The login screen and the dashboard talk to different backends.
LOGIN_API_BASE_URL = _base_url("LOGIN_API_BASE_URL", "https://web-production-f798a.up.railway.app")
DASHBOARD_API_BASE_URL = _base_url("DASHBOARD_API_BASE_URL", "http://localhost:8000")

DASHBOARD_LOGIN_EMAIL = os.getenv("DASHBOARD_LOGIN_EMAIL", "admin@lab.com")
DEFAULT_LOGIN_EMAIL = os.getenv("DEFAULT_LOGIN_EMAIL", "admin@lab.com")
DEFAULT_LOGIN_PASSWORD = os.getenv("DEFAULT_LOGIN_PASSWORD", "admin123")

CLIENT_ID_COOKIE = "lab_client_id"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()


def configure_logging() -> None:
    level = getattr(logging, LOG_LEVEL, None)
    if not isinstance(level, int):
        raise RuntimeError(f"LOG_LEVEL must be a logging level name, got {LOG_LEVEL!r}")
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
