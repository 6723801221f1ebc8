from abc import ABC, abstractmethod
from typing import Callable, Union


class Heuristic(ABC):
    @abstractmethod
    def estimate(self, dx: float, dy: float) -> float:
        """统一接口：只接受到目标的横纵距离 (绝对值)"""
        pass

    def __call__(self, dx: float, dy: float) -> float:
        return self.estimate(dx, dy)


class CallableHeuristic(Heuristic):
    """把普通函数 f(dx, dy) 包装成 Heuristic"""

    def __init__(self, fn: Callable[[float, float], float]):
        self.fn = fn

    def estimate(self, dx: float, dy: float) -> float:
        return self.fn(dx, dy)


def as_heuristic(h: Union[Heuristic, Callable[[float, float], float], None]) -> Heuristic:
    """
    规范化启发式参数
    None 或不可调用的对象属于调用方错误，构造时直接拒绝。
    """
    if isinstance(h, Heuristic):
        return h
    if callable(h):
        return CallableHeuristic(h)
    raise TypeError(f"heuristic must be a Heuristic or a callable (dx, dy) -> float, got {h!r}")
