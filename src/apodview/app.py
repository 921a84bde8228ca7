"""Streamlit page for NASA's Astronomy Picture of the Day."""

import itertools
import logging

import streamlit as st
from dotenv import load_dotenv
from streamlit_js_eval import streamlit_js_eval

load_dotenv()

from apodview.config import Settings  # noqa: E402
from apodview.download import DownloadAction, ImageDownloader, ToastNotifier  # noqa: E402
from apodview.fetch import ApodClient  # noqa: E402
from apodview.i18n import t  # noqa: E402
from apodview.models import Block, Success  # noqa: E402
from apodview.panel import DetailPanel  # noqa: E402
from apodview.renderers.card import PAGE_CSS, render_top_bar  # noqa: E402
from apodview.resource import RemoteResource  # noqa: E402
from apodview.view import render_view  # noqa: E402

_settings = Settings.from_env()

logging.basicConfig(
    level=_settings.log_level,
    format="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
)
logging.getLogger("httpx").setLevel(logging.WARNING)
_LOG = logging.getLogger("apodview.app")

# Seconds to block per rerun while the fetch is still in flight.
_LOADING_POLL_SECONDS = 0.5

# --- Language detection (browser-first via streamlit-js-eval) ---
# navigator.language is read once and cached in session_state.
# On the first run the JS call returns None; the rerun triggered by
# streamlit_js_eval fills it in.
if "lang" not in st.session_state:
    _browser_lang: str | None = streamlit_js_eval(
        js_expressions="navigator.language", key="_lang_detect", height=0
    )
    if _browser_lang is not None:
        st.session_state.lang = "es" if _browser_lang.lower().startswith("es") else "en"

_lang: str = st.session_state.get("lang", "en")

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="🔭",
    layout="centered",
    initial_sidebar_state="collapsed",
)


# --- Shared resources ---
# One HTTP client and one download pool for the whole server process,
# not one per browser session.
@st.cache_resource(show_spinner=False)
def _shared_client(api_key: str, api_url: str, timeout: float) -> ApodClient:
    _LOG.info("Creating shared APOD client")
    return ApodClient(api_key=api_key, base_url=api_url, timeout=timeout)


@st.cache_resource(show_spinner=False)
def _shared_downloader(download_dir: str, timeout: float) -> ImageDownloader:
    _LOG.info("Creating shared image downloader for %s", download_dir)
    return ImageDownloader(download_dir, timeout=timeout)


# --- Session state initialization ---
# apod_resource and downloader may be injected before the first run (tests, embedding).
if "apod_resource" not in st.session_state:
    _client = _shared_client(_settings.api_key, _settings.api_url, _settings.timeout)
    st.session_state.apod_resource = RemoteResource(_client.fetch_apod, name="apod")
    _LOG.info("New session, APOD fetch scheduled")
if "panel_snapshot" not in st.session_state:
    st.session_state.panel_snapshot = DetailPanel().snapshot()

resource: RemoteResource = st.session_state.apod_resource
resource.start()


def _on_toggle() -> None:
    panel = DetailPanel.restore(st.session_state.panel_snapshot)
    panel.toggle()
    st.session_state.panel_snapshot = panel.snapshot()


def _render_block(block: Block, on_download: DownloadAction | None) -> None:
    match block.kind:
        case "markup":
            st.markdown(block.html, unsafe_allow_html=True)
        case "toggle":
            st.button(block.label, key=block.key, icon=block.icon, on_click=_on_toggle)
        case "download":
            st.button(
                block.icon or block.label,
                key=block.key,
                help=block.label,
                on_click=on_download,
                disabled=on_download is None,
            )


st.markdown(PAGE_CSS, unsafe_allow_html=True)
st.markdown(render_top_bar(_lang), unsafe_allow_html=True)

# --- Content ---
state = resource.state
panel = DetailPanel.restore(st.session_state.panel_snapshot)
view = render_view(state, panel, _lang)

match state:
    case Success(data=record):
        if "downloader" in st.session_state:
            downloader = st.session_state.downloader
        else:
            downloader = _shared_downloader(str(_settings.download_dir), _settings.timeout)
        on_download = DownloadAction(
            record.image_url,
            downloader,
            ToastNotifier(),
            lang=_lang,
            duration=_settings.toast_duration,
        )
    case _:
        on_download = None

for group, blocks in itertools.groupby(view.blocks, key=lambda b: b.group):
    if group == "card":
        with st.container(key="apod_card"):
            for block in blocks:
                _render_block(block, on_download)
    else:
        for block in blocks:
            _render_block(block, on_download)

# --- Waiting for the fetch ---
# The spinner is already on screen; block briefly and rerun until the state settles.
if view.branch == "loading":
    resource.wait(_LOADING_POLL_SECONDS)
    st.rerun()
