# jps_lab/planning/path_utils.py
"""
路径后处理工具

规划器返回的是跳点序列，相邻两点之间是一段直线。
这里提供插值展开、压缩、转弯计数和代价统计等常用操作。
"""
from typing import List, Sequence

from jps_lab.types import Cell, direction_between
from jps_lab.map.base import MapBase


def interpolate(x0: int, y0: int, x1: int, y1: int) -> List[Cell]:
    """
    Bresenham 直线插值，包含两个端点。
    对正交线段就是逐格展开。
    """
    line = []
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy

    while True:
        line.append((x0, y0))
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x0 += sx
        if e2 < dx:
            err += dx
            y0 += sy
    return line


def expand_path(path: Sequence[Cell]) -> List[Cell]:
    """把跳点序列展开为逐格路径"""
    if len(path) < 2:
        return list(path)

    expanded = []
    for (x0, y0), (x1, y1) in zip(path[:-1], path[1:]):
        segment = interpolate(x0, y0, x1, y1)
        expanded.extend(segment[:-1])
    expanded.append(tuple(path[-1]))
    return expanded


def compress_path(path: Sequence[Cell]) -> List[Cell]:
    """去掉共线的中间点，只保留起点、终点和转折点"""
    if len(path) < 3:
        return [tuple(p) for p in path]

    compressed = [tuple(path[0])]
    last_dir = direction_between(path[0], path[1])
    for prev, cur in zip(path[1:-1], path[2:]):
        d = direction_between(prev, cur)
        if d != last_dir:
            compressed.append(tuple(prev))
            last_dir = d
    compressed.append(tuple(path[-1]))
    return compressed


def count_turns(path: Sequence[Cell]) -> int:
    """方向发生变化的次数 (共线的跳点不算转弯)"""
    turns = 0
    last_dir = None
    for a, b in zip(path[:-1], path[1:]):
        d = direction_between(a, b)
        if d == (0, 0):
            continue
        if last_dir is not None and d != last_dir:
            turns += 1
        last_dir = d
    return turns


def path_length(path: Sequence[Cell]) -> int:
    """逐格步数 (相邻跳点间的曼哈顿距离之和)"""
    return sum(abs(b[0] - a[0]) + abs(b[1] - a[1]) for a, b in zip(path[:-1], path[1:]))


def path_cost(path: Sequence[Cell], grid_map: MapBase, turn_penalty: float = 0.0) -> float:
    """
    按规划器的计价方式重算路径代价：
    每段 曼哈顿距离 * 段终点权重，每次转弯再加 turn_penalty
    """
    cost = 0.0
    for a, b in zip(path[:-1], path[1:]):
        cost += (abs(b[0] - a[0]) + abs(b[1] - a[1])) * grid_map.get_weight_at(b[0], b[1])
    return cost + turn_penalty * count_turns(path)


def is_path_walkable(path: Sequence[Cell], grid_map: MapBase) -> bool:
    """展开后的每一格都可通行，且相邻格子正交相邻"""
    cells = expand_path(path)
    for cell in cells:
        if not grid_map.is_walkable_at(cell[0], cell[1]):
            return False
    for a, b in zip(cells[:-1], cells[1:]):
        if abs(b[0] - a[0]) + abs(b[1] - a[1]) != 1:
            return False
    return True
