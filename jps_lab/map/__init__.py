# jps_lab/map/__init__.py

from .base import MapBase, DiagonalMovement
from .grid_map import GridMap
from .generator import MapGenerator

__all__ = ["MapBase", "DiagonalMovement", "GridMap", "MapGenerator"]
