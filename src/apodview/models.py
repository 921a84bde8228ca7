"""Data model: APOD record, fetch state union, and the render tree."""

from dataclasses import dataclass
from typing import Generic, Literal, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ApodRecord:
    """One Astronomy Picture of the Day entry. Owned by the fetch layer."""

    image_url: str  # "url" field of the APOD payload
    title: str
    explanation: str
    date: str  # "YYYY-MM-DD" as sent by NASA, not validated here
    copyright: str | None = None  # absent for public-domain images
    media_type: str = "image"  # "image" | "video"
    thumbnail_url: str | None = None  # only for videos, requested with thumbs=true


@dataclass(frozen=True)
class Loading:
    """Fetch in flight. No payload."""


@dataclass(frozen=True)
class Success(Generic[T]):
    """Fetch completed with a value."""

    data: T


@dataclass(frozen=True)
class Error:
    """Fetch failed. `cause` is for logs only, never shown to the user."""

    cause: str


ResourceState = Loading | Success[T] | Error

Branch = Literal["loading", "success", "error"]


@dataclass(frozen=True)
class Block:
    """A single node of the rendered page. The app maps `kind` to a Streamlit call."""

    kind: Literal["markup", "toggle", "download"]
    key: str
    group: Literal["header", "card", "footer", "status"] = "card"
    html: str = ""  # markup blocks
    label: str = ""  # toggle/download blocks
    icon: str | None = None  # Streamlit material icon, e.g. ":material/download:"


@dataclass(frozen=True)
class RenderedView:
    """Output of one render pass. Equal inputs give equal views."""

    branch: Branch
    blocks: tuple[Block, ...]

    @property
    def text(self) -> str:
        """Every piece of markup and every label, in render order."""
        return "\n".join(b.html or b.label for b in self.blocks)

    def keys(self) -> tuple[str, ...]:
        return tuple(b.key for b in self.blocks)
