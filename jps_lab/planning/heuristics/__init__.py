# jps_lab/planning/heuristics/__init__.py

from .base import Heuristic, CallableHeuristic, as_heuristic
from .euclidean import EuclideanHeuristic
from .octile import OctileHeuristic
from .zero import ZeroHeuristic
from .manhattan import ManhattanHeuristic
from .chebyshev import ChebyshevHeuristic


__all__ = [
    "Heuristic",
    "CallableHeuristic",
    "as_heuristic",
    "EuclideanHeuristic",
    "OctileHeuristic",
    "ZeroHeuristic",
    "ManhattanHeuristic",
    "ChebyshevHeuristic",
]
