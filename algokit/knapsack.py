"""Greedy (discrete and fractional) and dynamic-programming knapsack solvers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class GreedyKnapsackResult:
    """Outcome of the greedy price-to-weight heuristic.

    ``fractional_item`` is the first item that did not fit whole; the
    continuous variant adds ``fraction`` of it.
    """

    items: tuple[int, ...]
    discrete_profit: float
    fractional_item: int | None
    fraction: float
    continuous_profit: float


@dataclass(frozen=True)
class DPKnapsackResult:
    """Full DP table, the chosen item indices (ascending) and the optimal value."""

    table: tuple[tuple[int, ...], ...]
    items: tuple[int, ...]
    value: int


def _prepare(weights: Iterable[int], prices: Iterable[int], capacity: int) -> tuple[list[int], list[int]]:
    weights, prices = list(weights), list(prices)
    if len(weights) != len(prices):
        raise ValueError("weights and prices must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    return weights, prices


def greedy_knapsack(weights: Iterable[int], prices: Iterable[int], capacity: int) -> GreedyKnapsackResult:
    """Take items by descending price/weight ratio until one does not fit."""
    weights, prices = _prepare(weights, prices, capacity)
    if any(weight <= 0 for weight in weights):
        raise ValueError("weights must be positive")

    def ratio(index: int) -> float:
        return prices[index] / weights[index]

    available = [index for index in range(len(weights)) if ratio(index) > 0]
    remaining = capacity
    chosen: list[int] = []
    profit = 0.0
    blocked: int | None = None
    while available:
        best = max(available, key=ratio)
        if weights[best] > remaining:
            blocked = best
            break
        chosen.append(best)
        remaining -= weights[best]
        profit += prices[best]
        available.remove(best)

    if blocked is None:
        fraction = 0.0
        continuous = profit
    else:
        fraction = remaining / weights[blocked]
        continuous = profit + fraction * prices[blocked]
    return GreedyKnapsackResult(tuple(chosen), profit, blocked, fraction, continuous)


def knapsack_dp(weights: Iterable[int], prices: Iterable[int], capacity: int) -> DPKnapsackResult:
    """Solve the 0/1 knapsack exactly with a bottom-up table and trace back the items."""
    weights, prices = _prepare(weights, prices, capacity)
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")

    table = [[0] * (capacity + 1)]
    for weight, price in zip(weights, prices):
        prev = table[-1]
        row = [0] + [
            prev[j] if j < weight else max(prev[j], price + prev[j - weight])
            for j in range(1, capacity + 1)
        ]
        table.append(row)

    chosen = []
    room = capacity
    for item in range(len(weights), 0, -1):
        if table[item][room] != table[item - 1][room]:
            chosen.append(item - 1)
            room -= weights[item - 1]

    return DPKnapsackResult(
        table=tuple(tuple(row) for row in table),
        items=tuple(sorted(chosen)),
        value=table[-1][-1],
    )