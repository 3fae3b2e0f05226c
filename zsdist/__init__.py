"""Tree edit distance for ordered labelled trees: parsing, Zhang-Shasha, an exhaustive baseline and a benchmark."""

__version__ = "0.1.0"

__all__ = ["tree", "parser", "distance", "benchmark"]