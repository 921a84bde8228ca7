"""HTML fragments for the APOD page.

Each function returns a markup string for st.markdown(unsafe_allow_html=True).
All text coming from the API is escaped. Styling lives in PAGE_CSS, which the
app injects once per run; fragments only reference its class names.
"""

from __future__ import annotations

import html

from apodview.i18n import t
from apodview.models import ApodRecord

_BG = "#0b1020"
_CARD_BG = "#1b2236"
_TEXT = "#e6e8f0"
_MUTED = "#9aa3b8"
_ACCENT = "#7ec8e3"

PAGE_CSS = f"""
<style>
html, body, [data-testid="stAppViewContainer"], [data-testid="stMain"] {{
    background-color: {_BG} !important;
    color: {_TEXT};
}}
[data-testid="stHeader"], [data-testid="stToolbar"] {{
    display: none !important;
}}
.apod-topbar {{
    font-size: 1.35rem;
    font-weight: 600;
    padding: 0.6rem 0 0.2rem;
    color: {_TEXT};
}}
.apod-title {{
    text-align: center;
    font-size: 1.1rem;
    font-weight: 500;
    padding: 1.2rem 0.4rem 0.4rem;
}}
/* Card: the keyed container holding image, download button, toggle, details */
.st-key-apod_card {{
    position: relative;
    background: {_CARD_BG};
    border-radius: 12px;
    box-shadow: 0 6px 18px rgba(0, 0, 0, 0.45);
    padding: 10px;
}}
/* Download affordance overlaid on the image's top-right corner */
.st-key-download_btn {{
    position: absolute !important;
    top: 1.6rem;
    right: 1.6rem;
    width: auto !important;
    z-index: 2;
}}
.st-key-download_btn button {{
    background: transparent !important;
    border: none !important;
    color: {_BG} !important;
}}
.st-key-toggle_btn {{
    display: flex;
    justify-content: flex-end;
}}
/* Image: placeholder spinner underneath, picture paints over it once loaded */
.apod-image {{
    display: grid;
    min-height: 12rem;
    border-radius: 5%;
    overflow: hidden;
}}
.apod-image > * {{
    grid-area: 1 / 1;
}}
.apod-image img, .apod-image iframe {{
    width: 100%;
    border: none;
    animation: apod-fade-in 0.6s ease-out;
}}
.apod-image img {{
    position: relative;
    z-index: 1;
    height: 100%;
    object-fit: contain;
    background-color: {_CARD_BG};
}}
.apod-image iframe {{
    aspect-ratio: 16 / 9;
}}
.apod-spinner {{
    place-self: center;
    width: 2.4rem;
    height: 2.4rem;
    border: 3px solid rgba(126, 200, 227, 0.25);
    border-top-color: {_ACCENT};
    border-radius: 50%;
    animation: apod-spin 0.9s linear infinite;
}}
.apod-loading {{
    display: flex;
    justify-content: center;
    padding: 30vh 0;
}}
.apod-error {{
    text-align: center;
    color: {_MUTED};
    padding: 30vh 1rem;
}}
/* Details grow in instead of popping; long text scrolls instead of clipping */
.apod-details {{
    max-height: 60vh;
    overflow-y: auto;
    animation: apod-grow 0.45s cubic-bezier(0.34, 1.4, 0.64, 1);
    transform-origin: top;
}}
.apod-explanation {{
    text-align: justify;
    line-height: 1.6;
    padding: 15px;
}}
.apod-meta {{
    text-align: center;
    color: {_MUTED};
    padding: 6px;
}}
@keyframes apod-spin {{
    to {{ transform: rotate(360deg); }}
}}
@keyframes apod-fade-in {{
    from {{ opacity: 0; }}
    to   {{ opacity: 1; }}
}}
@keyframes apod-grow {{
    from {{ max-height: 0; opacity: 0; }}
    to   {{ max-height: 60vh; opacity: 1; }}
}}
</style>
"""


def render_top_bar(lang: str) -> str:
    return f"<div class='apod-topbar'>{html.escape(t('top_bar_apod_title', lang))}</div>"


def render_loading(lang: str) -> str:
    """Indeterminate progress indicator, nothing else."""
    label = html.escape(t("loading", lang))
    return (
        f"<div class='apod-loading' role='progressbar' aria-label='{label}'>"
        "<div class='apod-spinner'></div></div>"
    )


def render_error(lang: str) -> str:
    """Static apology text. The failure cause is deliberately not a parameter."""
    return f"<div class='apod-error'>{html.escape(t('connection_problems', lang))}</div>"


def render_title(title: str) -> str:
    return f"<div class='apod-title'>{html.escape(title)}</div>"


def image_source(record: ApodRecord) -> tuple[str, bool]:
    """Pick what the image slot shows: (url, is_embed).

    Videos show NASA's extracted thumbnail frame when there is one,
    otherwise the video URL itself is embedded. GIFs and stills pass through.
    """
    if record.media_type == "video":
        if record.thumbnail_url:
            return record.thumbnail_url, False
        return record.image_url, True
    return record.image_url, False


def render_image(record: ApodRecord) -> str:
    """Image slot with a loading placeholder behind the picture.

    A URL that fails to load leaves the placeholder area in place; no error
    is raised or shown.
    """
    url, is_embed = image_source(record)
    src = html.escape(url, quote=True)
    alt = html.escape(record.date, quote=True)
    if is_embed:
        media = f"<iframe src='{src}' title='{alt}' allowfullscreen></iframe>"
    else:
        media = f"<img src='{src}' alt='{alt}' loading='lazy'>"
    return f"<div class='apod-image'><div class='apod-spinner'></div>{media}</div>"


def render_explanation(explanation: str) -> str:
    return f"<div class='apod-explanation'>{html.escape(explanation)}</div>"


def normalize_copyright(copyright: str | None) -> str:
    """Drop embedded line breaks. No copyright gives an empty attribution."""
    if copyright is None:
        return ""
    return copyright.replace("\n", "")


def render_copyright(copyright: str | None, lang: str) -> str:
    # Always rendered, even when the attribution is empty.
    label = html.escape(t("label_copyright", lang))
    text = html.escape(normalize_copyright(copyright))
    return f"<div class='apod-meta apod-copyright'>&copy; {label}: {text}</div>"


def render_details(record: ApodRecord, lang: str) -> str:
    return (
        "<div class='apod-details'>"
        f"{render_explanation(record.explanation)}"
        f"{render_copyright(record.copyright, lang)}"
        "</div>"
    )


def render_date(date: str, lang: str) -> str:
    label = html.escape(t("label_date", lang))
    return f"<div class='apod-meta apod-date'>{label}: {html.escape(date)} &#128197;</div>"
