from .core import Puzzle

__all__ = ["Puzzle"]
