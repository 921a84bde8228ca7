"""APOD fetch layer: NASA API call and payload parsing."""

import logging
import ssl
from typing import Any

import certifi
import httpx

from apodview.config import APOD_URL
from apodview.models import ApodRecord

_LOG = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("url", "title", "explanation", "date")


class ApodFetchError(Exception):
    """APOD API call or payload failure."""


def ssl_context() -> ssl.SSLContext:
    """Default context pinned to certifi's CA bundle."""
    return ssl.create_default_context(cafile=certifi.where())


def parse_apod(payload: Any) -> ApodRecord:
    """Map one APOD JSON object to an ApodRecord.

    Raises:
        ApodFetchError: payload is not an object or lacks a required field.
    """
    if not isinstance(payload, dict):
        raise ApodFetchError(f"unexpected APOD payload type: {type(payload).__name__}")
    missing = [k for k in _REQUIRED_FIELDS if not isinstance(payload.get(k), str)]
    if missing:
        raise ApodFetchError(f"APOD payload missing fields: {', '.join(missing)}")

    return ApodRecord(
        image_url=payload["url"],
        title=payload["title"],
        explanation=payload["explanation"],
        date=payload["date"],
        copyright=payload.get("copyright"),
        media_type=payload.get("media_type") or "image",
        thumbnail_url=payload.get("thumbnail_url"),
    )


class ApodClient:
    """Thin NASA APOD client. One GET per call, no retries."""

    def __init__(
        self,
        api_key: str,
        base_url: str = APOD_URL,
        timeout: float = 10,
        client: httpx.Client | None = None,
    ):
        self._api_key = api_key
        self._base_url = base_url
        self._client = client or httpx.Client(timeout=timeout, verify=ssl_context())

    def fetch_apod(self) -> ApodRecord:
        """Fetch today's picture.

        Returns:
            The parsed ApodRecord.

        Raises:
            ApodFetchError: On transport error, non-2xx status, or bad payload.
        """
        params = {"api_key": self._api_key, "thumbs": "true"}
        _LOG.info("Fetching APOD from %s", self._base_url)
        try:
            resp = self._client.get(self._base_url, params=params)
            resp.raise_for_status()
            payload = resp.json()
        except httpx.HTTPError as e:
            raise ApodFetchError(f"APOD request failed: {e}") from e
        except ValueError as e:
            raise ApodFetchError("APOD response is not JSON") from e

        record = parse_apod(payload)
        _LOG.info("Fetched APOD %s: %s", record.date, record.title)
        return record

    def close(self) -> None:
        self._client.close()
