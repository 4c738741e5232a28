"""
Anchor providers.

An anchor is anything with a ``center()`` method returning its current
position in screen coordinates: pixels, origin at the top-left, y growing
downward. Chains query their anchors every frame, so a provider may return
a different point on each call.
"""
from dataclasses import dataclass
from typing import Any, Optional


class PointAnchor:
    """A fixed point that can be moved by hand."""

    def __init__(self, x, y):
        self.x = float(x)
        self.y = float(y)

    def __repr__(self):
        return f"PointAnchor({self.x}, {self.y})"

    def center(self):
        return self.x, self.y

    def move_to(self, x, y):
        self.x = float(x)
        self.y = float(y)


class ArtistAnchor:
    """Center of a matplotlib artist's window extent, in screen coordinates."""

    def __init__(self, artist):
        self.artist = artist

    def __repr__(self):
        return f"ArtistAnchor({self.artist.get_gid() or self.artist!r})"

    def center(self):
        figure = self.artist.get_figure()
        bbox = self.artist.get_window_extent()
        x = (bbox.x0 + bbox.x1) / 2
        y = (bbox.y0 + bbox.y1) / 2
        # Display coordinates grow upward, screen coordinates grow downward
        return float(x), float(figure.bbox.height - y)


@dataclass
class AnchorPair:
    """A prospective chain. Either end may be missing."""

    name: str
    start: Optional[Any]
    end: Optional[Any]

    def is_complete(self):
        return self.start is not None and self.end is not None
