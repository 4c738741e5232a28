"""Sagging ribbons between screen anchors (Verlet + distance relaxation)."""
from ribbon.point_mass import PointMass
from ribbon.constraint import DistanceConstraint
from ribbon.chain import RibbonChain
from ribbon.anchors import AnchorPair, ArtistAnchor, PointAnchor
from ribbon.driver import SimulationDriver

__all__ = [
    "PointMass",
    "DistanceConstraint",
    "RibbonChain",
    "AnchorPair",
    "ArtistAnchor",
    "PointAnchor",
    "SimulationDriver",
]
