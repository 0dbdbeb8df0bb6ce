import pytest

from algokit.knapsack import greedy_knapsack, knapsack_dp

CASES = [
    ([10, 20, 30], [60, 100, 120], 50),
    ([2, 1, 3, 2], [12, 10, 20, 15], 5),
    ([4, 7, 5, 3], [40, 42, 25, 12], 10),
    ([1, 2], [3, 4], 10),
    ([5], [10], 0),
]


def test_greedy_textbook_example():
    result = greedy_knapsack([10, 20, 30], [60, 100, 120], 50)
    assert result.discrete_profit == pytest.approx(160)
    assert result.fractional_item == 2
    assert result.continuous_profit == pytest.approx(240)


def test_greedy_everything_fits():
    result = greedy_knapsack([1, 2], [3, 4], 10)
    assert sorted(result.items) == [0, 1]
    assert result.fractional_item is None
    assert result.continuous_profit == result.discrete_profit


@pytest.mark.parametrize("weights, prices, capacity", CASES)
def test_greedy_invariants(weights, prices, capacity):
    result = greedy_knapsack(weights, prices, capacity)
    assert sum(weights[i] for i in result.items) <= capacity
    assert result.discrete_profit == pytest.approx(sum(prices[i] for i in result.items))
    assert 0 <= result.fraction < 1
    assert result.continuous_profit >= result.discrete_profit
    assert len(set(result.items)) == len(result.items)


@pytest.mark.parametrize(
    "weights, prices, capacity",
    [([1, 2], [3], 5), ([0, 2], [3, 4], 5), ([1], [1], -1)],
)
def test_greedy_rejects_bad_input(weights, prices, capacity):
    with pytest.raises(ValueError):
        greedy_knapsack(weights, prices, capacity)


def test_dp_textbook_example():
    result = knapsack_dp([2, 1, 3, 2], [12, 10, 20, 15], 5)
    assert result.value == 37


@pytest.mark.parametrize("weights, prices, capacity", CASES)
def test_dp_table_shape_and_borders(weights, prices, capacity):
    result = knapsack_dp(weights, prices, capacity)
    assert len(result.table) == len(weights) + 1
    assert all(len(row) == capacity + 1 for row in result.table)
    assert set(result.table[0]) == {0}
    assert all(row[0] == 0 for row in result.table)
    assert result.value == result.table[-1][-1]


@pytest.mark.parametrize("weights, prices, capacity", CASES)
def test_dp_items_match_value(weights, prices, capacity):
    result = knapsack_dp(weights, prices, capacity)
    assert sum(weights[i] for i in result.items) <= capacity
    assert sum(prices[i] for i in result.items) == result.value
    assert list(result.items) == sorted(set(result.items))


@pytest.mark.parametrize("weights, prices, capacity", CASES)
def test_dp_lies_between_greedy_bounds(weights, prices, capacity):
    exact = knapsack_dp(weights, prices, capacity).value
    greedy = greedy_knapsack(weights, prices, capacity)
    assert greedy.discrete_profit <= exact <= greedy.continuous_profit + 1e-9


def test_dp_zero_capacity():
    result = knapsack_dp([1, 2], [3, 4], 0)
    assert result.value == 0
    assert result.items == ()


@pytest.mark.parametrize(
    "weights, prices, capacity",
    [([1, 2], [3], 5), ([-1, 2], [3, 4], 5), ([1], [1], -2)],
)
def test_dp_rejects_bad_input(weights, prices, capacity):
    with pytest.raises(ValueError):
        knapsack_dp(weights, prices, capacity)