import json
import logging

from pywebpush import WebPushException, webpush

from fitlog.core.config import settings
from fitlog.core.constants import GONE_STATUS_CODES, PUSH_ICON
from fitlog.core.exceptions import PushDeliveryError, SubscriptionGone

logger = logging.getLogger(__name__)


def push_configured() -> bool:
    return bool(settings.vapid_public_key and settings.vapid_private_key)


def build_payload(title: str, body: str, url: str = "/dashboard") -> dict:
    return {
        "title": title,
        "body": body,
        "icon": PUSH_ICON,
        "badge": PUSH_ICON,
        "url": url,
    }


def send_push(endpoint: str, p256dh: str, auth: str, payload: dict) -> None:
    """Deliver one notification to one browser subscription.

    Raises SubscriptionGone for 404/410 answers so the caller can drop
    the row, PushDeliveryError for anything else.
    """
    subscription_info = {
        "endpoint": endpoint,
        "keys": {"p256dh": p256dh, "auth": auth},
    }
    try:
        webpush(
            subscription_info=subscription_info,
            data=json.dumps(payload),
            vapid_private_key=settings.vapid_private_key,
            vapid_claims={"sub": settings.vapid_contact},
        )
    except WebPushException as e:
        status = e.response.status_code if e.response is not None else None
        if status in GONE_STATUS_CODES:
            raise SubscriptionGone(f"Subscription gone ({status})", status_code=status) from e
        raise PushDeliveryError(f"Push failed: {e}", status_code=status) from e
