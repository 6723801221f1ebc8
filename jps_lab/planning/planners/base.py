# jps_lab/planning/planners/base.py
from abc import ABC, abstractmethod
from typing import List, Optional

from jps_lab.types import Cell
from jps_lab.map.base import MapBase
from jps_lab.planning.interfaces import IPlannerObserver

class PlannerBase(ABC):
    """
    所有路径规划器的抽象基类
    """

    @abstractmethod
    def plan(self,
             start: Cell,
             goal: Cell,
             grid_map: MapBase,
             debugger: Optional[IPlannerObserver] = None) -> List[Cell]:
        """
        执行路径规划
        :param start: 起点栅格坐标
        :param goal: 目标栅格坐标
        :param grid_map: 环境地图
        :param debugger: 观察者钩子 (用于记录/可视化搜索过程)
        :return: 跳点序列 (如果失败返回空列表)
        """
        pass
