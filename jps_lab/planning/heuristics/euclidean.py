# jps_lab/planning/heuristics/euclidean.py
import math
from .base import Heuristic

class EuclideanHeuristic(Heuristic):
    """
    欧氏距离启发式
    对正交移动来说偏小 (Admissible但Loose)，扩展节点更多。
    """
    def estimate(self, dx: float, dy: float) -> float:
        return math.hypot(dx, dy)
