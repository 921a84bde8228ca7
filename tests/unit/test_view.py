"""
tests/unit/test_view.py
render_view(): one branch per state, purity, expansion gating, no error leakage.
"""

import pytest

from apodview.i18n import t
from apodview.models import Error, Loading, Success
from apodview.panel import DetailPanel
from apodview.view import render_view


def _states(record):
    return [Loading(), Success(record), Error(cause="boom")]


def test_each_state_renders_its_own_branch(record):
    branches = [render_view(s, DetailPanel()).branch for s in _states(record)]
    assert branches == ["loading", "success", "error"]


def test_loading_renders_only_the_progress_indicator(record):
    view = render_view(Loading(), DetailPanel(expanded=True))
    assert view.keys() == ("loading",)
    assert "apod-spinner" in view.text
    assert record.title not in view.text


def test_error_renders_only_the_static_message():
    view = render_view(Error(cause="boom"), DetailPanel(expanded=True))
    assert view.keys() == ("error",)
    assert t("connection_problems", "en") in view.text
    assert "apod-spinner" not in view.text


def test_error_cause_never_reaches_output():
    view = render_view(Error(cause="network timeout"), DetailPanel())
    assert t("connection_problems", "en") in view.text
    assert "network timeout" not in view.text


def test_error_message_is_localized():
    view = render_view(Error(cause="x"), DetailPanel(), lang="es")
    assert t("connection_problems", "es") in view.text


def test_success_always_has_title_image_date_and_actions(record):
    view = render_view(Success(record), DetailPanel())
    assert view.keys() == ("title", "image", "download_btn", "toggle_btn", "date")
    assert record.title in view.text
    assert record.image_url in view.text
    assert "Date: 2024-01-15" in view.text
    assert "apod-spinner'></div><img" in view.text


@pytest.mark.parametrize("expanded", [False, True])
def test_render_is_idempotent(record, expanded):
    for state in _states(record):
        first = render_view(state, DetailPanel(expanded=expanded))
        second = render_view(state, DetailPanel(expanded=expanded))
        assert first == second


@pytest.mark.parametrize("expanded", [False, True])
def test_details_present_iff_expanded_and_success(record, expanded):
    for state in _states(record):
        view = render_view(state, DetailPanel(expanded=expanded))
        has_details = record.explanation in view.text or "apod-copyright" in view.text
        assert has_details == (expanded and isinstance(state, Success))


def test_toggle_icon_follows_panel(record):
    collapsed = render_view(Success(record), DetailPanel(expanded=False))
    expanded = render_view(Success(record), DetailPanel(expanded=True))
    icon = {b.key: b.icon for b in collapsed.blocks}["toggle_btn"]
    assert icon == ":material/expand_more:"
    icon = {b.key: b.icon for b in expanded.blocks}["toggle_btn"]
    assert icon == ":material/expand_less:"


def test_details_sit_between_toggle_and_date(record):
    view = render_view(Success(record), DetailPanel(expanded=True))
    assert view.keys() == ("title", "image", "download_btn", "toggle_btn", "details", "date")
    groups = [b.group for b in view.blocks]
    assert groups == ["header", "card", "card", "card", "card", "footer"]


def test_api_text_is_escaped(record):
    from dataclasses import replace

    hostile = replace(record, title="<script>alert(1)</script>")
    view = render_view(Success(hostile), DetailPanel())
    assert "<script>" not in view.text
    assert "&lt;script&gt;" in view.text
