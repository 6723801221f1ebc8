# jps_lab/planning/strategies/base.py
from abc import ABC, abstractmethod
from typing import List, Optional

from jps_lab.types import Cell, Direction, SearchNode
from jps_lab.planning.search_state import SearchState


class JumpStrategy(ABC):
    """
    跳点搜索策略接口
    通用的 best-first 主循环 (BestFirstPlanner) 只通过这三个方法与具体的 JPS 变体交互。
    """

    # 调试：记录 jump 扫描过的每个格子
    track_jump_recursion: bool = False

    @abstractmethod
    def propose_directions(self, state: SearchState, node: SearchNode) -> List[Cell]:
        """返回需要从 node 出发扫描的相邻格子"""
        pass

    @abstractmethod
    def jump(self, state: SearchState, x: int, y: int, px: int, py: int) -> Optional[Cell]:
        """沿 (px, py) -> (x, y) 的方向扫描，返回跳点或 None"""
        pass

    @abstractmethod
    def cost_of(self, state: SearchState, node: SearchNode, jump_point: Cell,
                prev_direction: Optional[Direction]) -> float:
        """node -> jump_point 的边代价"""
        pass
