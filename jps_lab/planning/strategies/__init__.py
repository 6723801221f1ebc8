# jps_lab/planning/strategies/__init__.py

from .base import JumpStrategy
from .minimize_turns import MinimizeTurnsStrategy

__all__ = ["JumpStrategy", "MinimizeTurnsStrategy"]
