# localpros/services/notifications.py
"""Best-effort delivery of admin notifications.

Failures are logged and reported through the boolean result; nothing here
ever raises to the caller.
"""

import httpx

from localpros.core.config import settings
from localpros.core.logging import get_logger

LOGGER = get_logger(__name__, level=settings.log_level)


def notify_admins(title: str, content: str) -> bool:
    url = settings.notification_url
    if not url:
        LOGGER.info(f"[Notification] {title}: {content}")
        return False

    headers = {"Content-Type": "application/json"}
    if settings.notification_api_key:
        headers["Authorization"] = f"Bearer {settings.notification_api_key}"

    try:
        response = httpx.post(
            url,
            json={"title": title, "content": content},
            headers=headers,
            timeout=settings.notification_timeout_seconds,
        )
    except httpx.HTTPError as e:
        LOGGER.warning(f"[Notification] Failed to reach notification service: {e}")
        return False

    if response.is_success:
        return True
    LOGGER.warning(
        f"[Notification] Failed to notify admins ({response.status_code} {response.reason_phrase}): {response.text[:200]}"
    )
    return False
