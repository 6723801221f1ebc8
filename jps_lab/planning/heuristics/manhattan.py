# jps_lab/planning/heuristics/manhattan.py
from .base import Heuristic

class ManhattanHeuristic(Heuristic):
    """
    曼哈顿距离 (L1).
    Cost = |dx| + |dy|
    正交 (4-连通) 栅格上这是精确的无障碍代价，因此是可采纳的 (admissible)。
    注意：加入转弯惩罚后 h 仍不会高估，但 JPS 的剪枝使得最优性不再保证。
    """
    def estimate(self, dx: float, dy: float) -> float:
        return dx + dy
