import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def figure():
    fig = plt.figure(figsize=(10, 6), dpi=100)
    yield fig
    plt.close(fig)


class RecordingSurface:
    """Stand-in draw surface that remembers what was drawn."""

    def __init__(self):
        self.clears = 0
        self.strokes = []

    def clear(self):
        self.clears += 1
        self.strokes = []

    def stroke(self, path, style):
        self.strokes.append((path, style))
        return path

    def artists(self):
        return [path for path, _ in self.strokes]


@pytest.fixture
def surface():
    return RecordingSurface()
