import pytest

from jps_lab.map.grid_map import GridMap
from jps_lab.planning.costs import WeightedManhattanCost, TurnPenaltyCost, TurnCostModel


@pytest.fixture
def grid_map():
    weights = [[1.0] * 5 for _ in range(5)]
    weights[4][0] = 3.0   # (0, 4)
    return GridMap(5, 5, weights=weights)


def test_weighted_manhattan(grid_map):
    cost = WeightedManhattanCost()
    assert cost.calculate(grid_map, (0, 0), (4, 0)) == 4.0
    # 整段按跳点权重计价
    assert cost.calculate(grid_map, (0, 0), (0, 4)) == 12.0


def test_turn_penalty(grid_map):
    cost = TurnPenaltyCost(0.5)
    assert cost.calculate(grid_map, (4, 0), (4, 4), prev_direction=(1, 0)) == 0.5
    assert cost.calculate(grid_map, (4, 0), (4, 4), prev_direction=(0, 1)) == 0.0
    # 掉头同样算转弯
    assert cost.calculate(grid_map, (4, 0), (4, 4), prev_direction=(0, -1)) == 0.5
    # 起点没有进入方向
    assert cost.calculate(grid_map, (4, 0), (4, 4), prev_direction=None) == 0.0


def test_negative_penalty_rejected():
    with pytest.raises(ValueError):
        TurnPenaltyCost(-1.0)


def test_model_without_turn_minimization(grid_map):
    model = TurnCostModel(minimize_turns=False, turn_penalty=5.0)
    assert model.edge_cost(grid_map, (4, 0), (4, 4), prev_direction=(1, 0)) == 4.0


def test_zero_penalty_matches_plain_costs(grid_map):
    zero = TurnCostModel(minimize_turns=True, turn_penalty=0.0)
    plain = TurnCostModel(minimize_turns=False)
    cases = [
        ((0, 0), (4, 0), None),
        ((4, 0), (4, 4), (1, 0)),
        ((0, 0), (0, 4), (1, 0)),
        ((2, 2), (2, 0), (0, 1)),
    ]
    for current, jump_point, prev in cases:
        assert zero.edge_cost(grid_map, current, jump_point, prev) == \
            plain.edge_cost(grid_map, current, jump_point, prev)
