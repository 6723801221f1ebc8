# jps_lab/map/grid_map.py
import numpy as np
from typing import List, Optional, Sequence
from scipy.ndimage import label

from jps_lab.types import Cell
from .base import MapBase, DiagonalMovement


class GridMap(MapBase):
    """
    静态栅格地图：可通行矩阵 + 权重矩阵
    规划过程中只读，因此可以被多个查询同时共享。
    """

    def __init__(self, width: int, height: int,
                 matrix: Optional[Sequence[Sequence[int]]] = None,
                 weights: Optional[Sequence[Sequence[float]]] = None):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid size must be positive, got {width}x{height}")
        self._width = width
        self._height = height

        # 初始化全 0 (空闲) 矩阵，类型用 int8 节省内存
        self._grid = np.zeros((height, width), dtype=np.int8)
        if matrix is not None:
            arr = np.asarray(matrix)
            if arr.shape != (height, width):
                raise ValueError(f"Matrix shape {arr.shape} does not match grid ({height}, {width})")
            self._grid[arr != 0] = 1

        self._weights = np.ones((height, width), dtype=np.float64)
        if weights is not None:
            w = np.asarray(weights, dtype=np.float64)
            if w.shape != (height, width):
                raise ValueError(f"Weights shape {w.shape} does not match grid ({height}, {width})")
            if np.any(w < 1.0):
                raise ValueError("Cell weights must be >= 1")
            self._weights[:] = w

        self._regions = None  # 连通域标记缓存

    @classmethod
    def from_matrix(cls, matrix, weights=None) -> "GridMap":
        """由 (height, width) 矩阵构造，非零即障碍"""
        arr = np.asarray(matrix)
        if arr.ndim != 2:
            raise ValueError("Matrix must be two dimensional")
        height, width = arr.shape
        return cls(width, height, matrix=arr, weights=weights)

    @classmethod
    def from_strings(cls, rows: Sequence[str], obstacle: str = "#") -> "GridMap":
        """
        ASCII 地图，例如:
            "..#.."
            "..#.."
            "....."
        """
        if not rows:
            raise ValueError("Empty map")
        width = len(rows[0])
        if any(len(r) != width for r in rows):
            raise ValueError("All rows must have the same length")
        matrix = [[1 if ch == obstacle else 0 for ch in row] for row in rows]
        return cls(width, len(rows), matrix=matrix)

    @property
    def data(self) -> np.ndarray:
        return self._grid

    @property
    def weights(self) -> np.ndarray:
        return self._weights

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def is_walkable_at(self, x: int, y: int) -> bool:
        """查询栅格索引是否可通行"""
        if not self.is_inside(x, y):
            return False  # 越界视为障碍
        return bool(self._grid[y, x] == 0)

    def set_walkable_at(self, x: int, y: int, walkable: bool):
        if not self.is_inside(x, y):
            raise IndexError(f"({x}, {y}) is outside the {self._width}x{self._height} grid")
        self._grid[y, x] = 0 if walkable else 1
        self._regions = None

    def get_weight_at(self, x: int, y: int) -> float:
        if not self.is_inside(x, y):
            return float("inf")
        return float(self._weights[y, x])

    def set_weight_at(self, x: int, y: int, weight: float):
        if not self.is_inside(x, y):
            raise IndexError(f"({x}, {y}) is outside the {self._width}x{self._height} grid")
        if weight < 1.0:
            raise ValueError(f"Cell weight must be >= 1, got {weight}")
        self._weights[y, x] = weight

    def get_neighbors(self, x: int, y: int,
                      movement: DiagonalMovement = DiagonalMovement.NEVER) -> List[Cell]:
        """
        正交邻居，顺序固定为 上、右、下、左
        """
        if movement != DiagonalMovement.NEVER:
            raise ValueError(f"Only orthogonal movement is supported, got {movement}")

        neighbors = []
        for nx, ny in ((x, y - 1), (x + 1, y), (x, y + 1), (x - 1, y)):
            if self.is_walkable_at(nx, ny):
                neighbors.append((nx, ny))
        return neighbors

    def label_regions(self) -> np.ndarray:
        """
        4-连通区域标记 (scipy.ndimage.label 默认结构元素即为十字形)。
        障碍物标记为 0，可通行区域从 1 开始编号。结果缓存，地图修改后失效。
        """
        if self._regions is None:
            self._regions, num = label(self._grid == 0)
        return self._regions

    def invalidate_regions(self):
        """直接修改 data 之后调用"""
        self._regions = None

    def same_region(self, a: Cell, b: Cell) -> bool:
        """两个格子是否在同一个连通区域内"""
        if not (self.is_walkable_at(*a) and self.is_walkable_at(*b)):
            return False
        regions = self.label_regions()
        return bool(regions[a[1], a[0]] == regions[b[1], b[0]])
