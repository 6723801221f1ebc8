# jps_lab/planning/planners/best_first.py
from typing import List, Optional

from jps_lab.types import Cell, SearchNode, direction_between
from jps_lab.map.base import MapBase
from jps_lab.planning.planners.base import PlannerBase
from jps_lab.planning.heuristics import Heuristic, ManhattanHeuristic, as_heuristic
from jps_lab.planning.interfaces import IPlannerObserver
from jps_lab.planning.search_state import SearchState
from jps_lab.planning.strategies.base import JumpStrategy
from jps_lab.visualization.observers import EfficientObserver


class BestFirstPlanner(PlannerBase):
    """
    通用 best-first 跳点搜索主循环。

    工作流程：
    1. 起点入 OpenList (g=0, h=heuristic)。
    2. 每轮弹出 f 最小的节点并关闭；若为终点则回溯父指针得到路径。
    3. 否则由 strategy 给出候选方向 -> jump 得到跳点 -> 计算边代价 -> 松弛。
    4. OpenList 为空即无路径 (返回空列表，不抛异常)。

    具体的剪枝/跳跃/代价规则全部由注入的 JumpStrategy 决定。
    """

    def __init__(self,
                 strategy: JumpStrategy,
                 heuristic: Optional[Heuristic] = None,
                 check_connectivity: bool = False):
        if not isinstance(strategy, JumpStrategy):
            raise TypeError(f"strategy must be a JumpStrategy, got {strategy!r}")
        self.strategy = strategy
        self.h_fn = as_heuristic(heuristic if heuristic is not None else ManhattanHeuristic())
        self.check_connectivity = check_connectivity
        # 最近一次查询的搜索状态，便于测试和调试时检查 g 值、tested 格子等
        self.last_state: Optional[SearchState] = None

    def plan(self,
             start: Cell,
             goal: Cell,
             grid_map: MapBase,
             debugger: Optional[IPlannerObserver] = None) -> List[Cell]:

        # 1. 初始化观察者
        if debugger is None:
            debugger = EfficientObserver()
        debugger.set_map_info(grid_map)

        start = (int(start[0]), int(start[1]))
        goal = (int(goal[0]), int(goal[1]))
        debugger.log("Start planning", 'INFO', {'start': start, 'goal': goal})

        # 2. 起终点检查：越界或不可通行 => 无路径
        if not grid_map.is_walkable_at(*start):
            debugger.log("Start is out of bounds or blocked.", 'WARN', {'start': start})
            return []
        if not grid_map.is_walkable_at(*goal):
            debugger.log("Goal is out of bounds or blocked.", 'WARN', {'goal': goal})
            return []

        if self.check_connectivity and not grid_map.same_region(start, goal):
            debugger.log("Start and goal are in different regions.", 'WARN')
            return []

        # 3. 初始化本次查询的状态
        state = SearchState(grid_map, start, goal, track_tested=self.strategy.track_jump_recursion)
        self.last_state = state

        start_node = state.start_node
        start_node.g = 0.0
        start_node.h = self._estimate(start_node, state)
        start_node.f = start_node.h
        start_node.opened = True
        state.open_list.push(start_node)
        debugger.record_open_set_node(start_node.cell, start_node.f, start_node.h)

        # 4. 主循环
        try:
            while not state.open_list.empty():
                node = state.open_list.pop()
                node.closed = True
                state.expanded += 1
                debugger.record_current_expansion(node.cell)

                # A. 终止条件
                if node is state.goal_node:
                    path = self._backtrace(node)
                    debugger.log("Path found", 'INFO',
                                 {'jump_points': len(path), 'cost': node.g, 'expanded': state.expanded})
                    return path

                # B. 扩展跳点
                self._identify_successors(state, node, debugger)

            debugger.log("Open set is empty, no path found.", 'WARN', {'expanded': state.expanded})
            return []
        finally:
            for cell in state.tested:
                debugger.record_tested_cell(cell)

    def _identify_successors(self, state: SearchState, node: SearchNode, debugger: IPlannerObserver):
        prev_direction = None
        if node.parent is not None:
            prev_direction = direction_between(node.parent.cell, node.cell)

        for nx, ny in self.strategy.propose_directions(state, node):
            jump_point = self.strategy.jump(state, nx, ny, node.x, node.y)
            if jump_point is None:
                continue

            jump_node = state.node_at(*jump_point)
            if jump_node.closed:
                continue

            new_g = node.g + self.strategy.cost_of(state, node, jump_point, prev_direction)

            if not jump_node.opened or new_g < jump_node.g:
                jump_node.g = new_g
                if not jump_node.opened:
                    # h 只算一次
                    jump_node.h = self._estimate(jump_node, state)
                jump_node.f = jump_node.g + jump_node.h
                jump_node.parent = node

                if not jump_node.opened:
                    jump_node.opened = True
                    state.open_list.push(jump_node)
                else:
                    state.open_list.update_priority(jump_node)

                debugger.record_open_set_node(jump_point, jump_node.f, jump_node.h)
                debugger.record_edge(node.cell, jump_point)

    def _estimate(self, node: SearchNode, state: SearchState) -> float:
        goal = state.goal_node
        return self.h_fn.estimate(abs(node.x - goal.x), abs(node.y - goal.y))

    def _backtrace(self, node: SearchNode) -> List[Cell]:
        """从终点沿父指针回溯，再反转"""
        path = []
        while node is not None:
            path.append(node.cell)
            node = node.parent
        return path[::-1]
