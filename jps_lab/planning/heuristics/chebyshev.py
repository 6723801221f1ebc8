from .base import Heuristic

class ChebyshevHeuristic(Heuristic):
    """切比雪夫距离 max(|dx|, |dy|)"""
    def estimate(self, dx: float, dy: float) -> float:
        return max(dx, dy)
