"""
test_progress_reporter.py
-------------------------
Unit tests for ProgressReporter width mapping and loader wiring.
"""

import pytest

from tap_to_claim.core.services.asset_loader import AssetLoader
from tap_to_claim.core.services.event_manager import LoadProgressEvent
from tap_to_claim.ui.elements.progress_reporter import ProgressReporter
from tap_to_claim.ui.elements.shape import RectElement
from tests.conftest import write_png


@pytest.fixture
def bar():
    return RectElement(280, 384, 4, 28, fill=(255, 255, 255))


@pytest.mark.parametrize("fraction, width", [
    (0.0, 4),
    (0.25, 119),
    (0.5, 234),
    (1.0, 464),
    (-0.5, 4),
    (1.7, 464),
])
def test_width_for_fraction(bar, fraction, width):
    assert ProgressReporter(bar).width_for(fraction) == pytest.approx(width)


def test_report_resizes_bar(bar):
    reporter = ProgressReporter(bar)
    reporter.on_progress(LoadProgressEvent(0.5))

    assert bar.width == pytest.approx(234)
    assert reporter.last_fraction == 0.5


def test_smaller_fraction_shrinks_bar(bar):
    reporter = ProgressReporter(bar)
    reporter.report(0.75)
    reporter.report(0.25)
    assert bar.width == pytest.approx(119)


def test_invalid_range_raises(bar):
    with pytest.raises(ValueError):
        ProgressReporter(bar, min_width=10, max_width=5)


def test_attached_reporter_follows_loader(bar, textures, tmp_path):
    loader = AssetLoader(textures, base_path=str(tmp_path))
    for name in ("a", "b"):
        write_png(tmp_path / f"{name}.png")
        loader.image(name, f"{name}.png")
    ProgressReporter(bar).attach(loader)

    widths = []
    while not loader.update():
        widths.append(bar.width)
    widths.append(bar.width)

    assert widths == pytest.approx([234, 464])
