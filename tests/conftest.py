import pytest

from tryoutgeom.drawable import Drawable


class RecordingDrawable(Drawable):
    """Drawable that keeps every primitive call instead of rendering."""

    def __init__(self):
        super().__init__()
        self.calls = []

    def draw_line(self, p1, p2):
        self.calls.append(('line', tuple(p1), tuple(p2), self.layer, self.linetype))

    def draw_arc(self, p, r, start, end):
        self.calls.append(('arc', tuple(p), r, start, end, self.layer, self.linetype))

    def draw_ellipse(self, center, semi_major, semi_minor, rotation, start, end):
        self.calls.append(('ellipse', tuple(center), semi_major, semi_minor, rotation))

    def draw_text(self, text, location, height, rotation=0.0):
        self.calls.append(('text', text, tuple(location), height, rotation))

    def kinds(self):
        return [c[0] for c in self.calls]


@pytest.fixture
def recorder():
    return RecordingDrawable()
