"""Projection from the fetch state to the page's render tree.

render_view() is a pure function: it performs no I/O and returns equal
RenderedView values for equal inputs, so the app can call it on every
Streamlit rerun.
"""

from typing import assert_never

from apodview.i18n import t
from apodview.models import ApodRecord, Block, Error, Loading, RenderedView, ResourceState, Success
from apodview.panel import DetailPanel
from apodview.renderers.card import (
    render_date,
    render_details,
    render_error,
    render_image,
    render_loading,
    render_title,
)

_EXPAND_MORE = ":material/expand_more:"
_EXPAND_LESS = ":material/expand_less:"
_DOWNLOAD = ":material/download:"


def render_content(record: ApodRecord, panel: DetailPanel, lang: str) -> tuple[Block, ...]:
    """Title, card (image + download + toggle + details), date.

    Details are only part of the tree while the panel is expanded.
    """
    blocks = [
        Block(kind="markup", key="title", group="header", html=render_title(record.title)),
        Block(kind="markup", key="image", html=render_image(record)),
        Block(kind="download", key="download_btn", label=t("btn_download", lang), icon=_DOWNLOAD),
        Block(
            kind="toggle",
            key="toggle_btn",
            label=t("info", lang),
            icon=_EXPAND_LESS if panel.expanded else _EXPAND_MORE,
        ),
    ]
    if panel.expanded:
        blocks.append(Block(kind="markup", key="details", html=render_details(record, lang)))
    blocks.append(
        Block(kind="markup", key="date", group="footer", html=render_date(record.date, lang))
    )
    return tuple(blocks)


def render_view(state: ResourceState, panel: DetailPanel, lang: str = "en") -> RenderedView:
    """Map the current state to exactly one branch of the page."""
    match state:
        case Loading():
            block = Block(kind="markup", key="loading", group="status", html=render_loading(lang))
            return RenderedView(branch="loading", blocks=(block,))
        case Success(data=record):
            return RenderedView(branch="success", blocks=render_content(record, panel, lang))
        case Error():
            block = Block(kind="markup", key="error", group="status", html=render_error(lang))
            return RenderedView(branch="error", blocks=(block,))
        case _:
            assert_never(state)
