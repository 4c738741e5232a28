import numpy as np


class DistanceConstraint:
    """Keeps two points near rest_length apart by moving them directly."""

    def __init__(self, a, b, rest_length):
        self.a = a
        self.b = b
        self.rest_length = float(rest_length)

    def relax(self):
        """Single Gauss-Seidel pass, correction split half and half."""
        d = self.b.position - self.a.position
        dist = float(np.hypot(d[0], d[1]))

        # Coincident points have no correction direction
        if dist == 0.0:
            return

        diff = (self.rest_length - dist) / dist / 2
        offset = d * diff

        if not self.a.pinned:
            self.a.position -= offset
        if not self.b.pinned:
            self.b.position += offset

    def length(self):
        return float(np.linalg.norm(self.b.position - self.a.position))

    def error(self):
        return abs(self.length() - self.rest_length)
