import pytest

from jps_lab.types import SearchNode
from jps_lab.planning.open_list import OpenList


def make(x, f):
    node = SearchNode(x, 0)
    node.f = f
    return node


def test_pops_minimum_f():
    open_list = OpenList()
    for x, f in [(0, 5.0), (1, 2.0), (2, 9.0), (3, 1.0)]:
        open_list.push(make(x, f))

    order = [open_list.pop().x for _ in range(4)]
    assert order == [3, 1, 0, 2]
    assert open_list.empty()


def test_ties_are_fifo():
    open_list = OpenList()
    for x in range(5):
        open_list.push(make(x, 1.0))
    assert [open_list.pop().x for _ in range(5)] == [0, 1, 2, 3, 4]


def test_update_priority_reorders_and_drops_stale_entry():
    open_list = OpenList()
    a, b = make(0, 5.0), make(1, 3.0)
    open_list.push(a)
    open_list.push(b)

    a.f = 1.0
    open_list.update_priority(a)

    assert len(open_list) == 2
    assert open_list.pop() is a
    assert open_list.pop() is b
    # a 的旧记录不会再被弹出
    assert open_list.empty()
    with pytest.raises(IndexError):
        open_list.pop()


def test_update_priority_requires_membership():
    open_list = OpenList()
    with pytest.raises(KeyError):
        open_list.update_priority(make(0, 1.0))


def test_contains():
    open_list = OpenList()
    node = make(0, 1.0)
    assert node not in open_list
    open_list.push(node)
    assert node in open_list
    open_list.pop()
    assert node not in open_list
