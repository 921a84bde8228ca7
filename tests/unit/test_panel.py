import pytest

from apodview.panel import DetailPanel


def test_default_is_collapsed():
    assert DetailPanel().expanded is False


@pytest.mark.parametrize("n", range(0, 7))
def test_toggle_parity(n):
    panel = DetailPanel()
    for _ in range(n):
        panel.toggle()
    assert panel.expanded is (n % 2 == 1)


def test_toggle_returns_new_value():
    panel = DetailPanel()
    assert panel.toggle() is True
    assert panel.toggle() is False


def test_snapshot_round_trip():
    panel = DetailPanel()
    panel.toggle()
    assert DetailPanel.restore(panel.snapshot()) == DetailPanel(expanded=True)


@pytest.mark.parametrize("snapshot", [None, {}])
def test_restore_without_snapshot_gives_default(snapshot):
    assert DetailPanel.restore(snapshot) == DetailPanel()
