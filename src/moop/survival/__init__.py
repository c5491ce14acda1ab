"""Survival strategies."""

from moop.registry import SurvivalRegistry
from moop.survival.nsga2 import nsga2_survival

# Register built-in survival strategies
SurvivalRegistry.register("nsga2", nsga2_survival)

__all__ = ["nsga2_survival"]
