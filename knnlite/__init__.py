"""A small k-nearest-neighbours classifier over integer CSV datasets, with a command line."""

__version__ = "0.1.0"
__all__ = ["dataset", "knn", "cli"]