"""Shared fixtures: spy boxes that record how the container drives them."""

from dataclasses import replace

import pytest

from protoheight.boxes.primitives import RenderSizedBox
from protoheight.core.geometry import Size
from protoheight.core.node import RenderBox
from protoheight.debug import debug_settings
from protoheight.painting.canvas import Canvas


class SpyBox(RenderSizedBox):
    """A sized box that records layout, paint and hit-test calls."""

    def __init__(self, width, height, log=None, **kwargs):
        super().__init__(width, height, **kwargs)
        self.layout_calls = []
        self.painted_at = []
        self.hit_positions = []
        self.log = log

    def perform_layout(self):
        self.layout_calls.append(self.constraints)
        super().perform_layout()

    def paint(self, canvas, offset):
        self.painted_at.append(offset)
        if self.log is not None:
            self.log.append(("paint", self.name))
        super().paint(canvas, offset)

    def hit_test(self, result, position):
        self.hit_positions.append(position)
        if self.log is not None:
            self.log.append(("hit_test", self.name))
        return super().hit_test(result, position)


class NegativeBox(RenderBox):
    """A misbehaving child that reports a negative width without checks."""

    def layout(self, constraints, parent_uses_size=False):
        self._constraints = constraints
        self.size = Size(-5, 10)
        self._needs_layout = False

    def get_dry_layout(self, constraints):
        return Size(-5, 10)


@pytest.fixture
def spy_box():
    """Factory for SpyBox instances."""
    return SpyBox


@pytest.fixture
def negative_box():
    return NegativeBox


@pytest.fixture
def canvas():
    """A transparent 320x200 canvas."""
    return Canvas(320, 200)


@pytest.fixture(autouse=True)
def restore_debug_settings():
    """Undo any change a test makes to the shared debug settings."""
    saved = replace(debug_settings)
    yield
    debug_settings.update(saved)
