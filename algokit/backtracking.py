"""Backtracking searches: N queens and sum of subsets."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

MAX_QUEENS = 20


def n_queens(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every placement of n queens as a tuple of column indices per row."""
    if not 1 <= n <= MAX_QUEENS:
        raise ValueError(f"n must be between 1 and {MAX_QUEENS}")
    return _place((), n)


def _place(board: tuple[int, ...], n: int) -> Iterator[tuple[int, ...]]:
    row = len(board)
    if row == n:
        yield board
        return
    for col in range(n):
        if all(c != col and abs(c - col) != row - r for r, c in enumerate(board)):
            yield from _place(board + (col,), n)


def format_board(board: Sequence[int]) -> str:
    """Render a placement with ' Q ' for queens and ' - ' for empty squares."""
    size = len(board)
    return "\n".join(
        "".join(" Q " if col == queen else " - " for col in range(size)) for queen in board
    )


def sum_of_subsets(weights: Iterable[int], target: int) -> Iterator[tuple[int, ...]]:
    """Yield every subset of non-decreasing positive weights that sums to target."""
    weights = list(weights)
    if any(weight <= 0 for weight in weights):
        raise ValueError("weights must be positive")
    if any(a > b for a, b in zip(weights, weights[1:])):
        raise ValueError("weights must be in non-decreasing order")
    if not weights or sum(weights) < target or weights[0] > target:
        return iter(())
    return _subsets(weights, target, 0, 0, sum(weights), ())


def _subsets(
    weights: list[int], target: int, total: int, k: int, rest: int, chosen: tuple[int, ...]
) -> Iterator[tuple[int, ...]]:
    if k >= len(weights):
        return
    current = weights[k]
    following = weights[k + 1] if k + 1 < len(weights) else 0
    if total + current == target:
        yield chosen + (current,)
    elif total + current + following <= target:
        yield from _subsets(weights, target, total + current, k + 1, rest - current, chosen + (current,))
    if total + rest - current >= target and total + following <= target:
        yield from _subsets(weights, target, total, k + 1, rest - current, chosen)