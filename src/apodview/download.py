"""Fire-and-forget image download triggered from the picture card.

The trigger never waits for the transfer and never learns how it ended:
failures are logged by the worker thread and the user only ever sees the
"downloading" notification.
"""

import logging
import os
import tempfile
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path, PurePosixPath
from typing import Protocol
from urllib.parse import unquote, urlparse

import httpx
import streamlit as st

from apodview.fetch import ssl_context
from apodview.i18n import t

_LOG = logging.getLogger(__name__)

_FALLBACK_NAME = "apod.jpg"


def filename_for(url: str) -> str:
    """Last path segment of the URL, or a fixed name when there is none."""
    name = PurePosixPath(unquote(urlparse(url).path)).name
    return name or _FALLBACK_NAME


class Downloader(Protocol):
    def download_file(self, url: str) -> None: ...


class Notifier(Protocol):
    def notify(self, message: str, duration: str) -> None: ...


class ImageDownloader:
    """Streams files into `download_dir` on a small thread pool."""

    def __init__(
        self,
        download_dir: Path,
        client: httpx.Client | None = None,
        timeout: float = 30,
        max_workers: int = 4,
    ):
        self._dir = Path(download_dir)
        self._client = client or httpx.Client(
            timeout=timeout, verify=ssl_context(), follow_redirects=True
        )
        self._pool = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="download")

    def download_file(self, url: str) -> None:
        """Queue a transfer of `url` and return immediately."""
        _LOG.info("Download queued: %s", url)
        self._pool.submit(self._transfer, url)

    def close(self) -> None:
        """Wait for queued transfers, then release the HTTP client."""
        self._pool.shutdown(wait=True)
        self._client.close()

    def _transfer(self, url: str) -> Path | None:
        # Runs inside the pool; nobody reads the future, so every failure
        # must be logged here.
        tmp_name = None
        try:
            dest = self._dir / filename_for(url)
            self._dir.mkdir(parents=True, exist_ok=True)
            # Each attempt writes its own temp file so concurrent downloads of the
            # same URL never interleave bytes.
            fd, tmp_name = tempfile.mkstemp(dir=self._dir, prefix=".part-")
            with os.fdopen(fd, "wb") as f, self._client.stream("GET", url) as resp:
                resp.raise_for_status()
                for chunk in resp.iter_bytes():
                    f.write(chunk)
            os.replace(tmp_name, dest)
        except (httpx.HTTPError, httpx.InvalidURL, OSError, ValueError) as e:
            _LOG.error("Download failed for %s: %s", url, e)
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            return None
        _LOG.info("Downloaded %s -> %s", url, dest)
        return dest


class ToastNotifier:
    """Transient, non-blocking notification in the Streamlit page."""

    def notify(self, message: str, duration: str) -> None:
        st.toast(message, duration=_toast_duration(duration))


def _toast_duration(duration: str) -> str | int:
    return int(duration) if duration.isdigit() else duration


class DownloadAction:
    """Zero-argument trigger bound to one image URL.

    Every call starts an independent transfer and shows one notification.
    There is no de-duplication and no in-flight tracking.
    """

    def __init__(
        self,
        url: str,
        downloader: Downloader,
        notifier: Notifier,
        lang: str = "en",
        duration: str = "short",
    ):
        self.url = url
        self._downloader = downloader
        self._notifier = notifier
        self._lang = lang
        self._duration = duration

    def __call__(self) -> None:
        self._downloader.download_file(self.url)
        self._notifier.notify(t("downloading_toast", self._lang), self._duration)
