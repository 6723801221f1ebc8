# jps_lab/planning/smoother.py
from typing import Callable, Optional

from jps_lab.types import Cell
from jps_lab.map.base import MapBase
from jps_lab.planning.path_utils import interpolate


class LookAheadSmoother:
    """
    沿当前方向的前瞻捷径 (只走直线，不转弯)

    从 (x, y) 出发，d 从 look_ahead_distance 递减到 1，
    依次尝试 (x + dx*d, y + dy*d)，取第一个可通行且视线无遮挡的目标点。
    """

    def __init__(self, look_ahead_distance: int = 3):
        if look_ahead_distance < 1:
            raise ValueError(f"look_ahead_distance must be >= 1, got {look_ahead_distance}")
        self.look_ahead_distance = look_ahead_distance

    def smooth_jump(self,
                    grid_map: MapBase,
                    x: int, y: int,
                    dx: int, dy: int,
                    stop_at: Optional[Callable[[int, int], bool]] = None) -> Optional[Cell]:
        """
        :param stop_at: 捷径可以停在这些格子上，但不能越过它们 (终点、强制邻居等)；None 表示不检查
        :return: 能到达的最远点，连一步都走不了时返回 None
        """
        for dist in range(self.look_ahead_distance, 0, -1):
            nx = x + dx * dist
            ny = y + dy * dist

            if not grid_map.is_walkable_at(nx, ny):
                continue
            if self._is_clear(grid_map, x, y, nx, ny, stop_at):
                return nx, ny

        return None

    def _is_clear(self, grid_map: MapBase, x: int, y: int, nx: int, ny: int,
                  stop_at: Optional[Callable[[int, int], bool]]) -> bool:
        # 不含两端
        line = interpolate(x, y, nx, ny)
        for cx, cy in line[1:-1]:
            if not grid_map.is_walkable_at(cx, cy):
                return False
            if stop_at is not None and stop_at(cx, cy):
                return False
        return True
