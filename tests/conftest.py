import pytest

from apodview.models import ApodRecord


class RecordingDownloader:
    def __init__(self):
        self.urls: list[str] = []

    def download_file(self, url: str) -> None:
        self.urls.append(url)


class RecordingNotifier:
    def __init__(self):
        self.messages: list[tuple[str, str]] = []

    def notify(self, message: str, duration: str) -> None:
        self.messages.append((message, duration))


@pytest.fixture
def record() -> ApodRecord:
    return ApodRecord(
        image_url="https://apod.nasa.gov/apod/image/2401/NGC1232_Webb_960.jpg",
        title="Spiral Galaxy NGC 1232",
        explanation="Galaxies are fascinating not only for what is visible, but for what is invisible.",
        date="2024-01-15",
        copyright="\nJohn Doe\n",
    )


@pytest.fixture
def downloader() -> RecordingDownloader:
    return RecordingDownloader()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()
