# src/segplot/transforms/scatter.py
"""
scatter.py
==========

Subsample + clamp + jitter raw per-position counts so that a dense, discrete
count distribution reads as a scatter cloud.

    x = positions[::step]
    y = (min(count, max_count) + U - 0.5) * 2 / coverage,   U ~ Uniform[0, 1)

The jitter is cosmetic. Pass a seeded ``numpy.random.Generator`` for
reproducible output.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple

import numpy as np


def sample_counts(
    counts: Sequence[float],
    positions: Sequence[float],
    *,
    max_count: float,
    coverage: float,
    step: int,
    rng: Optional[Any] = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Return (xs, ys) for a count scatter plot.

    Parameters
    ----------
    counts, positions : (N,)
        Read counts and their coordinates, index-aligned.
    max_count : float
        Counts above this are clamped.
    coverage : float
        Normalization; y is scaled by 2 / coverage (diploid copy number).
    step : int
        Keep every step-th point, starting with the first.
    rng : object with ``random(size)``, optional
        Jitter source. Defaults to ``np.random.default_rng()``.
    """
    if step < 1:
        raise ValueError(f"step must be >= 1, got {step}")
    if coverage == 0:
        raise ValueError("coverage must be non-zero")

    counts = np.asarray(counts, dtype=float).ravel()
    positions = np.asarray(positions).ravel()
    if counts.shape[0] != positions.shape[0]:
        raise ValueError(
            f"counts and positions differ in length: {counts.shape[0]} != {positions.shape[0]}"
        )

    if rng is None:
        rng = np.random.default_rng()

    xs = positions[::step].astype(float)
    clamped = np.minimum(counts[::step], float(max_count))
    jitter = np.asarray(rng.random(clamped.shape[0]), dtype=float)
    ys = (clamped + jitter - 0.5) * 2.0 / float(coverage)
    return xs, ys
