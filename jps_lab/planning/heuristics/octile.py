# jps_lab/planning/heuristics/octile.py
from .base import Heuristic

class OctileHeuristic(Heuristic):
    """
    8-连通地图的对角距离。
    正交移动时它不超过曼哈顿距离，仍可采纳，只是更松。
    """
    def estimate(self, dx: float, dy: float) -> float:
        # (sqrt(2) - 1) * min + max
        return 0.41421356 * min(dx, dy) + max(dx, dy)
