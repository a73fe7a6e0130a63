# Copyright (c) 2026 coursedemos
# Licensed under the Apache License, Version 2.0

"""
Synthetic 2-D data for the K-means stepper.

Points are a mixture of isotropic Gaussian blobs and a share of uniform
background noise spread over a wider box than the blobs, so that K-means has
something to get wrong.
"""

import logging
from typing import Optional, Sequence, Union

import numpy as np

from .errors import InvalidConfiguration

logger = logging.getLogger(__name__)

#: Blob centers are drawn uniformly from [-BLOB_BOX, BLOB_BOX]^2.
BLOB_BOX = 5.5

#: Noise points are drawn uniformly from [-NOISE_BOX, NOISE_BOX]^2.
NOISE_BOX = 8.0

SeedLike = Union[None, int, np.random.Generator]


def check_generator_args(
    n: int, blobs: int, spread_range: Sequence[float], noise_proportion: float
) -> None:
    """Raise InvalidConfiguration if the mixture cannot be sampled."""
    if n < 1:
        raise InvalidConfiguration(f"numPoints must be >= 1, got {n}")
    if blobs < 1:
        raise InvalidConfiguration(f"numBlobs must be >= 1, got {blobs}")
    if len(spread_range) != 2:
        raise InvalidConfiguration(
            f"spreadRange must be a [min, max] pair, got {list(spread_range)}"
        )
    spread_min, spread_max = spread_range
    if spread_min < 0 or spread_min > spread_max:
        raise InvalidConfiguration(
            f"spreadRange must satisfy 0 <= min <= max, got {list(spread_range)}"
        )
    if not 0.0 <= noise_proportion <= 1.0:
        raise InvalidConfiguration(
            f"noiseProportion must be within [0, 1], got {noise_proportion}"
        )


def make_clustered_data(
    n: int = 260,
    blobs: int = 4,
    spread_range: Sequence[float] = (1.4, 2.6),
    noise_proportion: float = 0.18,
    seed: SeedLike = None,
) -> np.ndarray:
    """
    Sample a point set from a blob-plus-noise mixture.

    Parameters
    ----------
    n : int, default=260
        Total number of points.

    blobs : int, default=4
        Number of Gaussian blobs.

    spread_range : (float, float), default=(1.4, 2.6)
        Each blob's standard deviation is uniform in this range. Wider blobs
        make the clustering harder.

    noise_proportion : float, default=0.18
        Share of the points drawn uniformly over the noise box instead of from
        a blob. ``round(n * noise_proportion)`` points are noise.

    seed : int, numpy.random.Generator, optional
        Seed or generator to draw from. ``None`` uses fresh OS entropy.

    Returns
    -------
    np.ndarray
        Read-only array of shape (n, 2): blob points first, then noise points.

    Examples
    --------
    >>> points = make_clustered_data(n=100, blobs=3, seed=42)
    >>> points.shape
    (100, 2)
    """
    check_generator_args(n, blobs, spread_range, noise_proportion)
    rng = np.random.default_rng(seed)
    spread_min, spread_max = spread_range

    centers = rng.uniform(-BLOB_BOX, BLOB_BOX, size=(blobs, 2))
    spreads = rng.uniform(spread_min, spread_max, size=blobs)

    # Python's round() is half-to-even
    n_noise = int(round(n * noise_proportion))
    n_blob = n - n_noise

    blob_id = rng.integers(0, blobs, size=n_blob)
    blob_points = rng.normal(loc=centers[blob_id], scale=spreads[blob_id, np.newaxis])
    noise_points = rng.uniform(-NOISE_BOX, NOISE_BOX, size=(n_noise, 2))

    points = np.vstack([blob_points.reshape(n_blob, 2), noise_points])
    points.flags.writeable = False

    logger.debug(
        "Sampled %d points (%d from %d blobs, %d noise)", n, n_blob, blobs, n_noise
    )
    return points
