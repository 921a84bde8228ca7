"""Runtime settings read from the environment (after load_dotenv)."""

import os
from dataclasses import dataclass
from pathlib import Path

APOD_URL = "https://api.nasa.gov/planetary/apod"


@dataclass(frozen=True)
class Settings:
    api_key: str
    api_url: str
    timeout: float  # seconds, applies to fetch and download
    download_dir: Path
    toast_duration: str  # "short" | "long" | "infinite" | seconds as digits
    log_level: str

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from NASA_API_KEY, APOD_* and LOG_LEVEL variables.

        Raises:
            ValueError: APOD_TIMEOUT is not a number.
        """
        raw_timeout = os.environ.get("APOD_TIMEOUT", "10")
        try:
            timeout = float(raw_timeout)
        except ValueError as e:
            raise ValueError(f"APOD_TIMEOUT must be a number, got {raw_timeout!r}") from e

        return cls(
            api_key=os.environ.get("NASA_API_KEY") or "DEMO_KEY",
            api_url=os.environ.get("APOD_API_URL", APOD_URL),
            timeout=timeout,
            download_dir=Path(os.environ.get("APOD_DOWNLOAD_DIR", "downloads")),
            toast_duration=os.environ.get("APOD_TOAST_DURATION", "short"),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        )
