# jps_lab/planning/search_state.py
from typing import Dict, Set

from jps_lab.types import Cell, SearchNode
from jps_lab.map.base import MapBase
from jps_lab.planning.open_list import OpenList


class SearchState:
    """
    单次查询的全部可变状态。

    g/h/f/opened/closed/parent 不挂在共享的地图节点上，而是放在按坐标懒分配的字典里；
    每次 plan() 新建一个 SearchState，同一张地图可以被重复或并发查询。
    """

    def __init__(self, grid_map: MapBase, start: Cell, goal: Cell, track_tested: bool = False):
        self.grid_map = grid_map
        self.open_list = OpenList()
        self.nodes: Dict[Cell, SearchNode] = {}
        self.start_node = self.node_at(*start)
        self.goal_node = self.node_at(*goal)
        self.track_tested = track_tested
        self.tested: Set[Cell] = set()
        self.expanded = 0

    def node_at(self, x: int, y: int) -> SearchNode:
        """同一坐标在一次查询内始终返回同一个对象"""
        node = self.nodes.get((x, y))
        if node is None:
            node = SearchNode(x, y)
            self.nodes[(x, y)] = node
        return node

    def is_goal(self, x: int, y: int) -> bool:
        return x == self.goal_node.x and y == self.goal_node.y

    def mark_tested(self, x: int, y: int):
        if self.track_tested:
            self.tested.add((x, y))
