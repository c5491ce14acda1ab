"""Generational drivers.

- nsga: the classic NSGA with fitness sharing
- nsga2: elitist NSGA-II with crowding distance
"""

from moop.algorithms.nsga import nsga
from moop.algorithms.nsga2 import nsga2

__all__ = ["nsga", "nsga2"]
