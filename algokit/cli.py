"""Command-line front end for the algorithm collection."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from .backtracking import MAX_QUEENS, format_board, n_queens, sum_of_subsets
from .graphs import floyd
from .knapsack import greedy_knapsack, knapsack_dp
from .sorting import SortResult, merge_sort, quick_sort, selection_sort

RAND_MAX = 2**31 - 1

_SORTERS: dict[str, Callable[[list[int]], SortResult]] = {
    "merge": merge_sort,
    "quick": quick_sort,
    "selection": selection_sort,
}


def _join(values: Sequence[object]) -> str:
    return " ".join(str(value) for value in values)


def _cmd_sort(args: argparse.Namespace) -> None:
    if args.count < 0:
        raise ValueError("number of elements must not be negative")
    rng = random.Random(args.seed)
    original = [rng.randint(0, RAND_MAX) for _ in range(args.count)]
    result = _SORTERS[args.algorithm](original)
    print("Original elements:")
    print(_join(original))
    print()
    print("After sorting:")
    print(_join(result.values))
    print()
    print(f"Number of basic operations = {result.operations}")


def _cmd_knapsack(args: argparse.Namespace) -> None:
    if args.dp:
        result = knapsack_dp(args.weights, args.prices, args.capacity)
        for row in result.table:
            print(_join(row))
        print(f"Items included: {_join(result.items)}")
        print(f"Optimal profit = {result.value}")
        return
    greedy = greedy_knapsack(args.weights, args.prices, args.capacity)
    print(f"Items included: {_join(greedy.items)}")
    print(f"Discrete Knapsack profit = {greedy.discrete_profit:f}")
    if greedy.fractional_item is not None:
        print(
            f"Continuous Knapsack also includes item {greedy.fractional_item} "
            f"with portion: {greedy.fraction:f}"
        )
    print(f"Continuous Knapsack profit = {greedy.continuous_profit:f}")


def _read_matrix(stream: TextIO) -> list[list[int]]:
    tokens = stream.read().split()
    if not tokens:
        raise ValueError("expected the number of vertices")
    try:
        numbers = [int(token) for token in tokens]
    except ValueError as exc:
        raise ValueError(f"invalid number in input: {exc}") from None
    size, entries = numbers[0], numbers[1:]
    if size < 0:
        raise ValueError("number of vertices must not be negative")
    if len(entries) < size * size:
        raise ValueError(f"expected {size * size} matrix entries, got {len(entries)}")
    return [entries[row * size:(row + 1) * size] for row in range(size)]


def _cmd_floyd(args: argparse.Namespace) -> None:
    matrix = _read_matrix(args.input)
    print("All pair shortest path")
    for row in floyd(matrix):
        print(_join(row))


def _cmd_queens(args: argparse.Namespace) -> None:
    total = 0
    for total, board in enumerate(n_queens(args.n), start=1):
        print()
        print(f"Solution {total}:")
        print(format_board(board))
    print()
    print(f"Total Solutions: {total}")


def _cmd_subsets(args: argparse.Namespace) -> None:
    found = 0
    for found, subset in enumerate(sum_of_subsets(args.weights, args.target), start=1):
        print(f"subset = {found}")
        print(_join(subset))
    if not found:
        print("No subset possible")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="algokit", description="Classic algorithm demonstrations.")
    commands = parser.add_subparsers(dest="command", required=True)

    sort = commands.add_parser("sort", help="sort random numbers and count basic operations")
    sort.add_argument("count", type=int, help="number of random elements")
    sort.add_argument("--algorithm", choices=sorted(_SORTERS), default="merge")
    sort.add_argument("--seed", type=int, default=None, help="seed for the random generator")
    sort.set_defaults(handler=_cmd_sort)

    knap = commands.add_parser("knapsack", help="solve a knapsack problem")
    knap.add_argument("--weights", type=int, nargs="+", required=True)
    knap.add_argument("--prices", type=int, nargs="+", required=True)
    knap.add_argument("--capacity", type=int, required=True)
    knap.add_argument("--dp", action="store_true", help="use the exact dynamic-programming solver")
    knap.set_defaults(handler=_cmd_knapsack)

    fl = commands.add_parser("floyd", help="all-pairs shortest paths of a cost matrix")
    fl.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r"),
        default="-",
        help="file holding the vertex count followed by the cost matrix (default: stdin)",
    )
    fl.set_defaults(handler=_cmd_floyd)

    queens = commands.add_parser("queens", help=f"list N-queens solutions (1..{MAX_QUEENS})")
    queens.add_argument("n", type=int)
    queens.set_defaults(handler=_cmd_queens)

    subsets = commands.add_parser("subsets", help="find subsets of increasing weights with a given sum")
    subsets.add_argument("--target", type=int, required=True)
    subsets.add_argument("weights", type=int, nargs="+")
    subsets.set_defaults(handler=_cmd_subsets)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the process exit status."""
    args = _build_parser().parse_args(argv)
    try:
        args.handler(args)
    except ValueError as exc:
        print(f"algokit: error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())