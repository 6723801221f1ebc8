# jps_lab/planning/heuristics/zero.py
from .base import Heuristic

class ZeroHeuristic(Heuristic):
    """
    零启发式 (h=0).
    这将使搜索退化为 Dijkstra，向四面八方均匀扩散。
    """
    def estimate(self, dx: float, dy: float) -> float:
        return 0.0
