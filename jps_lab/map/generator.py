# jps_lab/map/generator.py
import numpy as np
import random
from typing import Optional

from jps_lab.types import Cell
from jps_lab.map.grid_map import GridMap


class MapGenerator:
    """
    随机栅格地图生成器
    随机障碍 + 围墙，并在起终点之间开出一条 L 形通道，保证至少存在一条路径。
    """

    def __init__(self,
                 obstacle_density: float = 0.1,
                 max_weight: float = 1.0,
                 border: bool = True,
                 seed: Optional[int] = None):
        if not 0.0 <= obstacle_density < 1.0:
            raise ValueError(f"obstacle_density must be in [0, 1), got {obstacle_density}")
        if max_weight < 1.0:
            raise ValueError(f"max_weight must be >= 1, got {max_weight}")
        self.density = obstacle_density
        self.max_weight = max_weight
        self.border = border
        self.seed = seed
        self._rng = np.random.default_rng(seed)
        self._random = random.Random(seed)

    def generate(self, grid_map: GridMap, start: Cell, goal: Cell, carve: bool = True) -> GridMap:
        # 1. 随机障碍底图
        self._generate_random_obstacles(grid_map)

        # 2. 随机地形权重 (max_weight == 1 时全部为 1)
        if self.max_weight > 1.0:
            grid_map.weights[:] = self._rng.uniform(1.0, self.max_weight,
                                                    size=(grid_map.height, grid_map.width))

        # 3. 开出起点 -> 终点的 L 形通道
        if carve:
            self._carve_l_corridor(grid_map, start, goal)

        grid_map.data[start[1], start[0]] = 0
        grid_map.data[goal[1], goal[0]] = 0
        grid_map.invalidate_regions()
        return grid_map

    def _generate_random_obstacles(self, grid_map: GridMap):
        random_mask = self._rng.random((grid_map.height, grid_map.width)) < self.density
        grid_map.data[:] = 0
        grid_map.data[random_mask] = 1
        # 围墙
        if self.border:
            grid_map.data[0, :] = 1
            grid_map.data[-1, :] = 1
            grid_map.data[:, 0] = 1
            grid_map.data[:, -1] = 1

    def _carve_l_corridor(self, grid_map: GridMap, start: Cell, goal: Cell):
        """随机决定先走水平还是先走竖直"""
        (sx, sy), (gx, gy) = start, goal
        if self._random.random() < 0.5:
            corner = (gx, sy)
        else:
            corner = (sx, gy)
        for a, b in ((start, corner), (corner, goal)):
            x0, x1 = sorted((a[0], b[0]))
            y0, y1 = sorted((a[1], b[1]))
            grid_map.data[y0:y1 + 1, x0:x1 + 1] = 0
