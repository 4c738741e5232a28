import logging

import matplotlib.patheffects as pe
from matplotlib.patches import PathPatch

logger = logging.getLogger(__name__)


class MatplotlibSurface:
    """
    Draw surface covering the whole figure in screen pixel coordinates.

    The overlay axes has its limits set to the figure size in pixels with the
    y axis inverted, so a point (x, y) from an anchor can be drawn as data
    coordinates without any conversion.
    """

    def __init__(self, figure, zorder=2):
        self.figure = figure
        self.ax = figure.add_axes([0, 0, 1, 1], zorder=zorder)
        self.ax.set_axis_off()
        self.ax.set_navigate(False)
        self._patches = []
        width, height = self.size()
        self.resize(width, height)

    def size(self):
        return float(self.figure.bbox.width), float(self.figure.bbox.height)

    @property
    def width(self):
        return self.size()[0]

    def resize(self, width, height):
        self.ax.set_xlim(0, width)
        self.ax.set_ylim(height, 0)
        logger.debug("Surface resized to %.0fx%.0f px", width, height)

    def _points(self, px):
        # Line widths and shadow offsets are given in points
        return px * 72.0 / self.figure.dpi

    def clear(self):
        for patch in self._patches:
            patch.remove()
        self._patches = []

    def stroke(self, path, style):
        dx, dy = style.shadow_offset
        shadow = pe.SimpleLineShadow(
            offset=(self._points(dx), -self._points(dy)),
            shadow_color=style.shadow_color,
            alpha=style.shadow_alpha,
            linewidth=self._points(style.width + style.shadow_blur),
        )
        patch = PathPatch(
            path,
            fill=False,
            edgecolor=style.color,
            linewidth=self._points(style.width),
            capstyle=style.capstyle,
            joinstyle=style.joinstyle,
            path_effects=[shadow, pe.Normal()],
        )
        self.ax.add_patch(patch)
        self._patches.append(patch)
        return patch

    def artists(self):
        return list(self._patches)
