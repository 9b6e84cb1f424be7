"""Classic algorithms: sorting, knapsack, graphs, permutations and string matching."""

__version__ = "0.1.0"
__all__ = ["__version__"]