"""Parent selection strategies."""

from moop.registry import SelectionRegistry
from moop.selection.crowded import crowded_tournament
from moop.selection.roulette import roulette_wheel

# Register built-in selection strategies
SelectionRegistry.register("crowded", crowded_tournament)
SelectionRegistry.register("roulette", roulette_wheel)

__all__ = ["crowded_tournament", "roulette_wheel"]
