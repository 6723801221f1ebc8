# jps_lab/types.py
from dataclasses import dataclass, field
from typing import Optional, Tuple

# 栅格坐标 (x_index, y_index)
Cell = Tuple[int, int]

# 单位方向向量 (dx, dy)，正交移动时只有一个分量非零
Direction = Tuple[int, int]


def sign(v: float) -> int:
    """返回 -1 / 0 / 1"""
    if v > 0:
        return 1
    if v < 0:
        return -1
    return 0


def direction_between(a: Cell, b: Cell) -> Direction:
    """从 a 指向 b 的单位方向 (逐轴取符号)"""
    return sign(b[0] - a[0]), sign(b[1] - a[1])


@dataclass(eq=False)
class SearchNode:
    """
    搜索节点 (单次查询的临时记录)
    节点身份由坐标确定，g/h/f/opened/closed/parent 只在一次 plan() 内有效。
    """
    x: int
    y: int
    g: float = 0.0
    h: float = 0.0
    f: float = 0.0
    opened: bool = False
    closed: bool = False
    # 非拥有的回溯指针，仅用于从终点回溯路径
    parent: Optional["SearchNode"] = field(default=None, repr=False)

    @property
    def cell(self) -> Cell:
        return self.x, self.y
