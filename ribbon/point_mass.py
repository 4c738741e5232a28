import numpy as np

from ribbon.config import FRICTION, GRAVITY


class PointMass:
    """Verlet particle: velocity is implied by position - previous."""

    def __init__(self, x, y, pinned=False):
        self.position = np.array([x, y], dtype=float)
        self.previous = self.position.copy()
        self.pinned = pinned

    def __repr__(self):
        x, y = self.position
        return f"PointMass(x={x:.3f}, y={y:.3f}, pinned={self.pinned})"

    @property
    def velocity(self):
        return self.position - self.previous

    def integrate(self, gravity=GRAVITY, friction=FRICTION):
        """One damped Verlet step plus gravity on the vertical axis."""
        if self.pinned:
            return
        v = (self.position - self.previous) * friction
        self.previous = self.position.copy()
        self.position += v
        self.position[1] += gravity

    def apply_impulse(self, dx, dy):
        """Shift the previous position so the next step picks up (dx, dy)."""
        self.previous[0] -= dx
        self.previous[1] -= dy

    def pin_to(self, xy):
        # Only anchors move pinned points
        self.position[0] = xy[0]
        self.position[1] = xy[1]
