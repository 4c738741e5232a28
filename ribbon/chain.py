import logging

import numpy as np
from matplotlib.path import Path

from ribbon.config import (
    IMPULSE_BASE,
    IMPULSE_PROBABILITY,
    IMPULSE_SPREAD,
    RELAX_ITERATIONS,
    SEGMENTS,
    SLACK,
)
from ribbon.constraint import DistanceConstraint
from ribbon.point_mass import PointMass

logger = logging.getLogger(__name__)


class RibbonChain:
    """
    A chain of point masses hanging between two anchors.

    The first and last points are pinned to the anchors' screen centers and
    re-pinned every frame. Everything in between is integrated and then
    pulled back toward the rest lengths by a fixed number of relaxation
    passes. The rest length comes from SLACK times the anchor distance, so
    the chain is always too short for a straight line and sags.
    """

    def __init__(self, start_anchor, end_anchor, name=None, segments=SEGMENTS,
                 slack=SLACK, iterations=RELAX_ITERATIONS, rng=None):
        if segments < 1:
            raise ValueError(f"segments must be >= 1, got {segments}")
        if iterations < 0:
            raise ValueError(f"iterations must be >= 0, got {iterations}")

        self.start_anchor = start_anchor
        self.end_anchor = end_anchor
        self.name = name
        self.segments = segments
        self.slack = slack
        self.iterations = iterations
        self.rng = rng if rng is not None else np.random.default_rng()

        self.points = []
        self.constraints = []
        self.init_geometry()

    def __repr__(self):
        return f"RibbonChain(name={self.name!r}, points={len(self.points)})"

    def init_geometry(self):
        """Rebuild points and constraints from the anchors' current positions."""
        start = np.asarray(self.start_anchor.center(), dtype=float)
        end = np.asarray(self.end_anchor.center(), dtype=float)

        dist = float(np.linalg.norm(end - start))
        total_length = dist * self.slack
        segment_length = total_length / self.segments

        self.points = []
        for i in range(self.segments + 1):
            x, y = start + (end - start) * (i / self.segments)
            pinned = i == 0 or i == self.segments
            self.points.append(PointMass(x, y, pinned))

        self.constraints = [
            DistanceConstraint(self.points[i], self.points[i + 1], segment_length)
            for i in range(self.segments)
        ]
        logger.debug("%s: span %.1f px, segment length %.2f px", self, dist, segment_length)

    def repin(self):
        self.points[0].pin_to(self.start_anchor.center())
        self.points[-1].pin_to(self.end_anchor.center())

    def relax(self, iterations=None):
        """Run the relaxation passes over every constraint, in order."""
        iterations = self.iterations if iterations is None else iterations
        for _ in range(iterations):
            for c in self.constraints:
                c.relax()

    def step(self):
        self.repin()
        for p in self.points:
            p.integrate()
        self.relax()

    def render_path(self):
        """
        Smooth path through the points as quadratic segments.

        Each interior point is a control point and the curve ends halfway to
        the next point, so consecutive segments join with matching tangents.
        The closing segment uses the last point as both control and end.
        """
        if len(self.points) < 2:
            return None

        pts = [p.position for p in self.points]
        vertices = [pts[0]]
        codes = [Path.MOVETO]

        for i in range(1, len(pts) - 1):
            mid = (pts[i] + pts[i + 1]) / 2
            vertices += [pts[i], mid]
            codes += [Path.CURVE3, Path.CURVE3]

        vertices += [pts[-1], pts[-1]]
        codes += [Path.CURVE3, Path.CURVE3]

        return Path(np.array(vertices, dtype=float), codes)

    def perturb(self):
        """Shake: random kicks on roughly half of the interior points."""
        kicked = 0
        for p in self.points[1:-1]:
            if self.rng.random() > 1.0 - IMPULSE_PROBABILITY:
                force = IMPULSE_BASE + self.rng.random() * IMPULSE_SPREAD
                p.apply_impulse((self.rng.random() - 0.5) * force,
                                (self.rng.random() - 0.5) * force)
                kicked += 1
        logger.debug("%s: shake kicked %d points", self, kicked)

    def rest_length_total(self):
        return sum(c.rest_length for c in self.constraints)

    def constraint_error(self):
        """Mean deviation of segment length from rest length."""
        if not self.constraints:
            return 0.0
        return float(np.mean([c.error() for c in self.constraints]))
