# jps_lab/map/base.py
from abc import ABC, abstractmethod
from enum import Enum
import numpy as np
from typing import List

from jps_lab.types import Cell


class DiagonalMovement(Enum):
    """邻居扩展方式 (本项目的规划器只使用 NEVER)"""
    ALWAYS = 1
    NEVER = 2
    IF_AT_MOST_ONE_OBSTACLE = 3
    ONLY_WHEN_NO_OBSTACLES = 4


class MapBase(ABC):
    """
    地图抽象基类
    """

    @property
    @abstractmethod
    def data(self) -> np.ndarray:
        """
        返回地图数据矩阵，通常用于可视化或底层计算。
        约定：0 表示空闲，1 表示障碍物。
        """
        pass

    @property
    @abstractmethod
    def width(self) -> int:
        """网格宽度 (x方向数量)"""
        pass

    @property
    @abstractmethod
    def height(self) -> int:
        """网格高度 (y方向数量)"""
        pass

    @abstractmethod
    def is_walkable_at(self, x: int, y: int) -> bool:
        """
        [关键接口] 查询格子是否可通行
        越界必须返回 False，不能抛异常
        """
        pass

    @abstractmethod
    def get_weight_at(self, x: int, y: int) -> float:
        """格子的通行代价倍率 (>= 1)"""
        pass

    @abstractmethod
    def get_neighbors(self, x: int, y: int,
                      movement: DiagonalMovement = DiagonalMovement.NEVER) -> List[Cell]:
        """返回可通行的邻居坐标"""
        pass

    def is_inside(self, x: int, y: int) -> bool:
        """检查索引是否在地图范围内"""
        return 0 <= x < self.width and 0 <= y < self.height
