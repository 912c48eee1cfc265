"""Journal database pruning algorithms."""

from .algorithm import Algorithm

__all__ = ["Algorithm"]
