# jps_lab/planning/strategies/minimize_turns.py
from typing import List, Optional

from jps_lab.config import JPSConfig
from jps_lab.types import Cell, Direction, SearchNode, sign
from jps_lab.map.base import MapBase, DiagonalMovement
from jps_lab.planning.costs import TurnCostModel
from jps_lab.planning.search_state import SearchState
from jps_lab.planning.smoother import LookAheadSmoother
from .base import JumpStrategy


class MinimizeTurnsStrategy(JumpStrategy):
    """
    正交 (4-连通) JPS，偏好更少的转弯。

    与普通正交 JPS 的区别:
    1. jump 时用前瞻平滑一次跳过一段直线 (LookAheadSmoother)，
       但不会越过终点、强制邻居所在格、可以水平转出的格子以及终点所在的行/列；
    2. 剪枝时只保留真正能跳到跳点的侧向格子；
    3. 转弯在 g 上加固定惩罚。

    两种模式下竖直扫描的每一格都检查水平方向能否跳到跳点。
    minimize_turns 关闭 (或 look_ahead_distance == 1) 时退化为普通正交 JPS。
    """

    def __init__(self, config: Optional[JPSConfig] = None):
        self.config = config if config is not None else JPSConfig()
        self.minimize_turns = self.config.minimize_turns_active
        self.track_jump_recursion = self.config.track_jump_recursion
        self.smoother = LookAheadSmoother(self.config.look_ahead_distance)
        self.cost_model = TurnCostModel(self.minimize_turns, self.config.turn_penalty)

    # ------------------------------------------------------------------
    # 剪枝
    # ------------------------------------------------------------------
    def propose_directions(self, state: SearchState, node: SearchNode) -> List[Cell]:
        grid = state.grid_map
        x, y = node.x, node.y
        parent = node.parent

        # 起点：所有正交可通行邻居
        if parent is None:
            return grid.get_neighbors(x, y, DiagonalMovement.NEVER)

        dx = sign(x - parent.x)
        dy = sign(y - parent.y)

        neighbors = []
        if dx != 0:
            ahead = [(x + dx, y), (x + dx, y + 1), (x + dx, y - 1)]
            sides = [(x, y + 1), (x, y - 1)]
        elif dy != 0:
            ahead = [(x, y + dy), (x + 1, y + dy), (x - 1, y + dy)]
            sides = [(x + 1, y), (x - 1, y)]
        else:
            return neighbors

        # 斜前方的两个格子与 node 不共线，jump() 会直接拒绝
        for cell in ahead:
            if grid.is_walkable_at(*cell):
                neighbors.append(cell)

        # 侧向格子只有在确实能跳到跳点时才保留
        for cell in sides:
            if grid.is_walkable_at(*cell) and self.jump(state, cell[0], cell[1], x, y) is not None:
                neighbors.append(cell)

        return neighbors

    # ------------------------------------------------------------------
    # 跳跃
    # ------------------------------------------------------------------
    def jump(self, state: SearchState, x: int, y: int, px: int, py: int) -> Optional[Cell]:
        grid = state.grid_map
        dx = sign(x - px)
        dy = sign(y - py)

        # 只允许正交方向
        if (dx != 0 and dy != 0) or (dx == 0 and dy == 0):
            return None

        escapes = {}

        def has_escape(cx: int, cy: int) -> bool:
            # 竖直移动时，水平方向能跳到跳点的格子本身就是跳点 (两种模式都要检查)
            if dy == 0:
                return False
            if (cx, cy) not in escapes:
                escapes[(cx, cy)] = self._scan_line(state, cx + 1, cy, 1, 0) is not None or \
                    self._scan_line(state, cx - 1, cy, -1, 0) is not None
            return escapes[(cx, cy)]

        def stop_at(cx: int, cy: int) -> bool:
            return state.is_goal(cx, cy) or \
                self._crosses_goal_line(state, cx, cy, dx, dy) or \
                self._has_forced_neighbor(grid, cx, cy, dx, dy) or \
                has_escape(cx, cy)

        # 显式循环代替递归，长走廊不会爆栈
        while True:
            if not grid.is_walkable_at(x, y):
                return None

            state.mark_tested(x, y)

            if state.is_goal(x, y):
                return x, y

            if self._has_forced_neighbor(grid, x, y, dx, dy):
                return x, y

            if has_escape(x, y):
                return x, y

            if self.minimize_turns:
                # 穿过终点所在的行/列：在这里转弯可以直达终点
                if self._crosses_goal_line(state, x, y, dx, dy):
                    return x, y
                smooth = self.smoother.smooth_jump(grid, x, y, dx, dy, stop_at)
                if smooth is not None:
                    return smooth

            x += dx
            y += dy

    def _scan_line(self, state: SearchState, x: int, y: int, dx: int, dy: int) -> Optional[Cell]:
        """
        不带前瞻的直线扫描：只在终点或强制邻居处停下。
        用于判断竖直扫描中的格子能否向水平方向转出去。
        """
        grid = state.grid_map
        while grid.is_walkable_at(x, y):
            state.mark_tested(x, y)
            if state.is_goal(x, y) or self._has_forced_neighbor(grid, x, y, dx, dy):
                return x, y
            x += dx
            y += dy
        return None

    def _crosses_goal_line(self, state: SearchState, x: int, y: int, dx: int, dy: int) -> bool:
        goal = state.goal_node
        return (dx != 0 and x == goal.x) or (dy != 0 and y == goal.y)

    def _has_forced_neighbor(self, grid: MapBase, x: int, y: int, dx: int, dy: int) -> bool:
        walkable = grid.is_walkable_at
        if dx != 0:
            # 侧面有障碍，下一列侧面打开
            if (walkable(x + dx, y + 1) and not walkable(x, y + 1)) or \
                    (walkable(x + dx, y - 1) and not walkable(x, y - 1)):
                return True
            # 本列侧面打开，上一列侧面是障碍
            if (walkable(x, y + 1) and not walkable(x - dx, y + 1)) or \
                    (walkable(x, y - 1) and not walkable(x - dx, y - 1)):
                return True
        elif dy != 0:
            if (walkable(x + 1, y + dy) and not walkable(x + 1, y)) or \
                    (walkable(x - 1, y + dy) and not walkable(x - 1, y)):
                return True
            if (walkable(x + 1, y) and not walkable(x + 1, y - dy)) or \
                    (walkable(x - 1, y) and not walkable(x - 1, y - dy)):
                return True
        return False

    # ------------------------------------------------------------------
    # 代价
    # ------------------------------------------------------------------
    def cost_of(self, state: SearchState, node: SearchNode, jump_point: Cell,
                prev_direction: Optional[Direction]) -> float:
        return self.cost_model.edge_cost(state.grid_map, node.cell, jump_point, prev_direction)
