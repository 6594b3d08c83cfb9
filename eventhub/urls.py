"""
Helpers for building absolute URLs from the PUBLIC_URL setting.
"""

from eventhub.config import settings


def get_base_url() -> str:
    return settings.PUBLIC_URL.rstrip("/")


def get_api_url(path: str = "") -> str:
    clean_path = path if path.startswith("/") else f"/{path}"
    return f"{get_base_url()}/api/v1{clean_path}"


def get_event_url(event_uuid: str) -> str:
    """Public registration page of an event (served by the frontend)."""
    return f"{settings.FRONTEND_URL.rstrip('/')}/event/{event_uuid}"
