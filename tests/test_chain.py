import numpy as np
import pytest
from matplotlib.path import Path

from ribbon.anchors import PointAnchor
from ribbon.chain import RibbonChain
from ribbon.config import SEGMENTS, SLACK


@pytest.fixture
def anchors():
    # 3-4-5 triangle: span of exactly 500 px
    return PointAnchor(100, 100), PointAnchor(500, 400)


@pytest.fixture
def chain(anchors, rng):
    return RibbonChain(*anchors, name="test", rng=rng)


def test_geometry_scale(chain):
    assert len(chain.points) == SEGMENTS + 1
    assert len(chain.constraints) == SEGMENTS
    assert chain.rest_length_total() == pytest.approx(500 * SLACK)
    for c in chain.constraints:
        assert c.rest_length == pytest.approx(500 * SLACK / SEGMENTS)


def test_points_start_on_straight_line(chain):
    assert np.allclose(chain.points[0].position, [100, 100])
    assert np.allclose(chain.points[10].position, [300, 250])
    assert np.allclose(chain.points[-1].position, [500, 400])


def test_only_ends_are_pinned(chain):
    assert chain.points[0].pinned
    assert chain.points[-1].pinned
    assert not any(p.pinned for p in chain.points[1:-1])


def test_constraints_link_neighbours(chain):
    for i, c in enumerate(chain.constraints):
        assert c.a is chain.points[i]
        assert c.b is chain.points[i + 1]


def test_invalid_sizes_raise(anchors):
    with pytest.raises(ValueError):
        RibbonChain(*anchors, segments=0)
    with pytest.raises(ValueError):
        RibbonChain(*anchors, iterations=-1)


def test_repin_follows_moving_anchors(chain, anchors):
    start, end = anchors
    chain.perturb()
    for _ in range(30):
        chain.step()

    start.move_to(40, 60)
    end.move_to(900, 20)
    chain.repin()
    assert np.array_equal(chain.points[0].position, [40, 60])
    assert np.array_equal(chain.points[-1].position, [900, 20])

    chain.step()
    assert np.array_equal(chain.points[0].position, [40, 60])
    assert np.array_equal(chain.points[-1].position, [900, 20])


def test_step_sags_interior(rng):
    chain = RibbonChain(PointAnchor(100, 100), PointAnchor(500, 100), rng=rng)
    for _ in range(10):
        chain.step()
    assert chain.points[10].position[1] > 100
    assert np.array_equal(chain.points[0].position, [100, 100])


def test_relaxation_keeps_rest_separation(anchors):
    chain = RibbonChain(*anchors, slack=1.0)
    rest = chain.constraints[0].rest_length
    chain.relax(iterations=200)
    for c in chain.constraints:
        assert c.length() == pytest.approx(rest, abs=1e-9)


def _bent_pair(iterations):
    chain = RibbonChain(PointAnchor(0, 0), PointAnchor(10, 0),
                        segments=2, slack=1.4, iterations=iterations)
    chain.points[1].position[:] = [5.0, 1.0]
    return chain


def test_more_iterations_converge_further():
    low, high = _bent_pair(1), _bent_pair(60)
    low.relax()
    high.relax()
    assert high.constraint_error() < low.constraint_error()
    assert high.constraint_error() < 1e-6


def test_zero_iterations_leave_points(anchors):
    chain = RibbonChain(*anchors, iterations=0)
    chain.points[5].position[:] = [0, 0]
    chain.relax()
    assert np.array_equal(chain.points[5].position, [0, 0])


def test_init_geometry_replaces_state(chain, anchors):
    old_points = chain.points
    for _ in range(5):
        chain.step()
    anchors[1].move_to(100, 600)
    chain.init_geometry()

    assert chain.points is not old_points
    assert chain.rest_length_total() == pytest.approx(500 * SLACK)
    assert np.allclose(chain.points[10].position, [100, 350])
    assert all(np.array_equal(p.position, p.previous) for p in chain.points)


def test_render_path_shape(chain):
    chain.step()
    path = chain.render_path()
    pts = [p.position for p in chain.points]

    assert isinstance(path, Path)
    assert len(path.vertices) == 2 * len(pts) - 1
    assert path.codes[0] == Path.MOVETO
    assert all(code == Path.CURVE3 for code in path.codes[1:])

    assert np.allclose(path.vertices[0], pts[0])
    assert np.allclose(path.vertices[1], pts[1])
    assert np.allclose(path.vertices[2], (pts[1] + pts[2]) / 2)
    # closing curve has the last point as control and end
    assert np.allclose(path.vertices[-2], pts[-1])
    assert np.allclose(path.vertices[-1], pts[-1])


def test_render_path_needs_two_points(chain):
    chain.points = chain.points[:1]
    assert chain.render_path() is None


def test_perturb_only_changes_previous(chain):
    positions = [p.position.copy() for p in chain.points]
    previous = [p.previous.copy() for p in chain.points]

    chain.perturb()

    for p, pos in zip(chain.points, positions):
        assert np.array_equal(p.position, pos)
    assert np.array_equal(chain.points[0].previous, previous[0])
    assert np.array_equal(chain.points[-1].previous, previous[-1])

    kicked = [i for i, p in enumerate(chain.points)
              if not np.array_equal(p.previous, previous[i])]
    assert kicked
    assert 0 not in kicked and len(chain.points) - 1 not in kicked

    for i in kicked:
        p = chain.points[i]
        impulse = previous[i] - p.previous
        assert np.all(np.abs(impulse) <= 7.5)
        p.integrate(gravity=0.0)
        assert np.allclose(p.position - positions[i], impulse * 0.9)
