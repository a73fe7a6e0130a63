# Copyright (c) 2026 coursedemos
# Licensed under the Apache License, Version 2.0

"""
Text and plot helpers for showing a KMeansSnapshot.
"""

from typing import List, Tuple

import numpy as np

from .stepper import KMeansSnapshot


def status_report(snapshot: KMeansSnapshot) -> str:
    """
    Multi-line status text for the current run.

    Examples
    --------
    >>> print(status_report(stepper.step()))
    K (clusters chosen): 3
    Iteration: 1
    Within-cluster SSE (loss): 1234.567
    <BLANKLINE>
    Not yet converged. Step again to update centroids and reassign points.
    """
    if snapshot.points is None:
        return "No data yet."

    state = snapshot.state
    lines = [
        f"K (clusters chosen): {state.k}",
        f"Iteration: {state.iteration}",
    ]

    if snapshot.centroids is not None:
        lines.append(f"Within-cluster SSE (loss): {state.loss:.3f}")
    else:
        lines.append("Step K-means to initialize random centroids.")

    if state.converged:
        lines += [
            "",
            "Converged: assignments stopped changing.",
            "Regenerate points or change K to restart.",
        ]
    elif snapshot.centroids is not None:
        lines += [
            "",
            "Not yet converged. Step again to update centroids and reassign points.",
        ]

    if state.reseeded:
        ids = ", ".join(f"C{cluster}" for cluster in state.reseeded)
        lines.append(f"Re-seeded empty cluster(s): {ids}")

    return "\n".join(lines)


def centroid_labels(k: int) -> List[str]:
    """Display names of the centroids: C1 .. Ck."""
    return [f"C{cluster}" for cluster in range(1, k + 1)]


def plot_limits(
    points: np.ndarray, pad: float = 0.08
) -> Tuple[Tuple[float, float], Tuple[float, float]]:
    """
    Axis limits that show every point with some margin.

    Each axis is widened by ``pad`` times its span on both sides. An axis with
    zero span gets a margin of 1 instead.

    Returns
    -------
    ((xmin, xmax), (ymin, ymax))
    """
    lows = points.min(axis=0)
    highs = points.max(axis=0)
    margins = (highs - lows) * pad
    margins[margins == 0] = 1.0
    return (
        (float(lows[0] - margins[0]), float(highs[0] + margins[0])),
        (float(lows[1] - margins[1]), float(highs[1] + margins[1])),
    )
