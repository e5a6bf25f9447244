import pytest

from voxelkit.viewport import Viewport


def test_defaults():
    viewport = Viewport()
    assert (viewport.name, viewport.width, viewport.height) == ("OpenGL Window", 800, 600)
    assert viewport.resizable is True


def test_ratio_follows_resize():
    viewport = Viewport(width=300, height=300)
    assert viewport.ratio() == 1.0
    viewport.width = 600
    assert viewport.ratio() == pytest.approx(viewport.width / viewport.height)
    assert viewport.ratio() > 1.0


def test_zero_height_raises():
    with pytest.raises(ZeroDivisionError):
        Viewport(height=0).ratio()