"""Multi-objective test problems.

Two built-in problems are provided, selectable by their index:

- "1" / squares: f_k(x) = x_k^2 for k = 1..4, x_k in [-5, 5]
- "2" / ratio: f1(x) = x1, f2(x) = (1 + x2) / x1, x1 in [0.1, 1], x2 in [0, 5]

Any object following moop.protocols.Problem can be used instead; the drivers
run validate_problem on it before doing any work.
"""

from collections.abc import Callable
from dataclasses import dataclass, field

import numpy as np

from moop.protocols import Problem


@dataclass(frozen=True)
class FunctionProblem:
    """Problem defined by bounds and a plain objective function.

    Attributes:
        name: Human readable name.
        n_obj: Number of objectives the function returns.
        lower: Lower variable bounds, shape (n_vars,).
        upper: Upper variable bounds, shape (n_vars,).
        function: Maps (n_vars,) to (n_obj,).

    Example:
        >>> p = FunctionProblem("sum", 1, np.zeros(2), np.ones(2), lambda x: np.array([x.sum()]))
        >>> p.evaluate(np.array([0.25, 0.5]))
        array([0.75])
    """

    name: str
    n_obj: int
    lower: np.ndarray
    upper: np.ndarray
    function: Callable[[np.ndarray], np.ndarray] = field(repr=False)

    def __post_init__(self) -> None:
        lower = np.array(self.lower, dtype=np.float64)
        upper = np.array(self.upper, dtype=np.float64)
        if lower.ndim != 1 or upper.ndim != 1:
            raise ValueError(f"bounds must be 1D, got shapes {lower.shape} and {upper.shape}")
        if lower.shape != upper.shape:
            raise ValueError(f"lower has {lower.shape[0]} bounds but upper has {upper.shape[0]}")
        object.__setattr__(self, "lower", lower)
        object.__setattr__(self, "upper", upper)
        validate_problem(self)

    @property
    def n_vars(self) -> int:
        return self.lower.shape[0]

    def evaluate(self, x: np.ndarray) -> np.ndarray:
        """Evaluate one solution.

        Raises:
            ValueError: If x or the function's result has the wrong length.
        """
        x = np.asarray(x, dtype=np.float64)
        if x.shape != (self.n_vars,):
            raise ValueError(f"{self.name} expects {self.n_vars} variables, got shape {x.shape}")
        objectives = np.asarray(self.function(x), dtype=np.float64)
        if objectives.shape != (self.n_obj,):
            raise ValueError(f"{self.name} must return {self.n_obj} objectives, got shape {objectives.shape}")
        return objectives


def validate_problem(problem: Problem) -> None:
    """Fail fast on a malformed problem description.

    Raises:
        ValueError: If the counts are not positive, the bounds do not have
            n_vars entries, or a lower bound exceeds its upper bound.
    """
    if problem.n_vars <= 0:
        raise ValueError(f"n_vars must be positive, got {problem.n_vars}")
    if problem.n_obj <= 0:
        raise ValueError(f"n_obj must be positive, got {problem.n_obj}")

    lower = np.asarray(problem.lower)
    upper = np.asarray(problem.upper)
    if lower.shape != (problem.n_vars,):
        raise ValueError(f"lower bounds have shape {lower.shape}, expected ({problem.n_vars},)")
    if upper.shape != (problem.n_vars,):
        raise ValueError(f"upper bounds have shape {upper.shape}, expected ({problem.n_vars},)")
    if np.any(lower > upper):
        bad = np.flatnonzero(lower > upper).tolist()
        raise ValueError(f"lower bound exceeds upper bound for variables {bad}")


def _squares(x: np.ndarray) -> np.ndarray:
    return x * x


def _ratio(x: np.ndarray) -> np.ndarray:
    return np.array([x[0], (1.0 + x[1]) / x[0]])


def squares_problem() -> FunctionProblem:
    """Four separable objectives f_k(x) = x_k^2 over [-5, 5]^4."""
    return FunctionProblem(
        name="squares",
        n_obj=4,
        lower=np.full(4, -5.0),
        upper=np.full(4, 5.0),
        function=_squares,
    )


def ratio_problem() -> FunctionProblem:
    """Two objectives f1 = x1, f2 = (1 + x2) / x1 with x1 in [0.1, 1], x2 in [0, 5]."""
    return FunctionProblem(
        name="ratio",
        n_obj=2,
        lower=np.array([0.1, 0.0]),
        upper=np.array([1.0, 5.0]),
        function=_ratio,
    )


PROBLEMS: dict[str, Callable[[], FunctionProblem]] = {
    "1": squares_problem,
    "2": ratio_problem,
}


def get_problem(key: str) -> FunctionProblem:
    """Build a built-in problem from its index ("1", "2") or name.

    Raises:
        ValueError: If no such problem exists.
    """
    if key in PROBLEMS:
        return PROBLEMS[key]()
    for factory in PROBLEMS.values():
        problem = factory()
        if problem.name == key:
            return problem
    available = ", ".join(sorted(PROBLEMS))
    raise ValueError(f"Unknown problem '{key}'. Available: {available} (or squares, ratio)")
