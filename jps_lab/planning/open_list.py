# jps_lab/planning/open_list.py
import heapq
import itertools
from typing import Dict, List, Tuple

from jps_lab.types import Cell, SearchNode


class OpenList:
    """
    基于 heapq 的优先队列 (按 f 排序，f 相同时先进先出)。

    heapq 不支持原地修改优先级，update_priority 重新压入一条记录，
    旧记录在 pop 时通过版本号识别并丢弃 (lazy deletion)。
    """

    def __init__(self):
        self._heap: List[Tuple[float, int, SearchNode]] = []
        self._entry_seq: Dict[Cell, int] = {}
        self._counter = itertools.count()

    def push(self, node: SearchNode):
        seq = next(self._counter)
        self._entry_seq[node.cell] = seq
        heapq.heappush(self._heap, (node.f, seq, node))

    def update_priority(self, node: SearchNode):
        if node.cell not in self._entry_seq:
            raise KeyError(f"Node {node.cell} is not in the open list")
        self.push(node)

    def pop(self) -> SearchNode:
        while self._heap:
            f, seq, node = heapq.heappop(self._heap)
            if self._entry_seq.get(node.cell) != seq:
                continue  # stale
            del self._entry_seq[node.cell]
            return node
        raise IndexError("pop from an empty open list")

    def empty(self) -> bool:
        return not self._entry_seq

    def __len__(self) -> int:
        return len(self._entry_seq)

    def __contains__(self, node: SearchNode) -> bool:
        return node.cell in self._entry_seq
