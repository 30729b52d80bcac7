"""
Push sender: asks the push API to deliver a rich push to the device under test.

The API authenticates with the application key and master secret (HTTP basic
auth) and accepts a v3 push payload. Delivery is asynchronous: a successful
response only means the push was accepted, the notification shows up on the
device some time later and the caller has to poll for it.
"""

import logging
from typing import Optional

import httpx

from . import config
from .exceptions import DeliveryError

logger = logging.getLogger(__name__)


def build_rich_push_payload(segment: Optional[str] = None) -> dict:
    """
    Build the rich push payload.

    Args:
        segment: Tag of the audience segment, or None to broadcast to all.

    Returns:
        dict: v3 push payload ready for JSON serialization.
    """
    audience = {"tag": segment} if segment else "all"
    return {
        "audience": audience,
        "device_types": ["android"],
        "notification": {
            "alert": config.NOTIFICATION_ALERT,
        },
        "message": {
            "title": config.MESSAGE_TITLE,
            "body": config.MESSAGE_BODY,
            "content_type": "text/html",
        },
    }


class PushSender:
    """Sends rich push messages through the remote push API."""

    def __init__(
        self,
        master_secret: str,
        app_key: str,
        *,
        api_url: str = config.PUSH_API_URL,
        client: Optional[httpx.Client] = None,
    ):
        self._auth = (app_key, master_secret)
        self.app_key = app_key
        self.api_url = api_url
        # Only a client created here is closed by close()
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=config.PUSH_REQUEST_TIMEOUT)

    @classmethod
    def from_env(cls, **kwargs) -> "PushSender":
        """Create a sender from MASTER_SECRET and APP_KEY."""
        master_secret, app_key = config.get_push_credentials()
        return cls(master_secret, app_key, **kwargs)

    def send(self, segment: Optional[str] = None) -> dict:
        """
        Send a rich push to everyone, or to one named segment.

        Args:
            segment: Audience tag (e.g. "home"); None broadcasts to all.

        Returns:
            dict: Decoded JSON response from the push API (may be empty).

        Raises:
            DeliveryError: API unreachable or non-2xx response.
        """
        payload = build_rich_push_payload(segment)
        target = segment or "all"

        try:
            response = self._client.post(
                self.api_url,
                json=payload,
                auth=self._auth,
                headers={"Accept": config.PUSH_API_ACCEPT},
            )
        except httpx.HTTPError as e:
            logger.error(f"Push API unreachable ({target}): {e}")
            raise DeliveryError(str(e), segment=segment) from e

        if not response.is_success:
            reason = response.text or response.reason_phrase
            logger.warning(
                f"Push rejected: status={response.status_code}, "
                f"audience={target}, reason={reason}"
            )
            raise DeliveryError(reason, status_code=response.status_code, segment=segment)

        logger.info(f"Rich push accepted (audience={target}, status={response.status_code})")

        try:
            return response.json()
        except ValueError:
            return {}

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "PushSender":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
