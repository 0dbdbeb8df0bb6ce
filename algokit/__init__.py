"""Classic algorithms: sorting, knapsack, graph algorithms, backtracking and a command line."""

__version__ = "0.1.0"

__all__ = ["backtracking", "cli", "graphs", "knapsack", "sorting"]