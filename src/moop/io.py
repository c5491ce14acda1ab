"""Plain-text output of final populations."""

import logging
from pathlib import Path

import numpy as np

logger = logging.getLogger(__name__)


def write_population(path: str | Path, values: np.ndarray) -> Path:
    """Write one solution per line, components separated by commas.

    Args:
        path: Destination file. Overwritten if it exists.
        values: Shape (n, k); decision variables or objectives.

    Returns:
        The path written to.

    Raises:
        ValueError: If values is not 2D.
        OSError: If the file cannot be written.
    """
    values = np.asarray(values, dtype=np.float64)
    if values.ndim != 2:
        raise ValueError(f"values must be 2D, got shape {values.shape}")

    path = Path(path)
    np.savetxt(path, values, delimiter=",", fmt="%.17g")
    logger.info("Wrote %d rows to %s", values.shape[0], path)
    return path


def read_population(path: str | Path) -> np.ndarray:
    """Read a file written by write_population back into a 2D array."""
    return np.loadtxt(Path(path), delimiter=",", dtype=np.float64, ndmin=2)
