# Copyright (c) 2026 coursedemos
# Licensed under the Apache License, Version 2.0

"""
The pieces of one Lloyd iteration: assignment, centroid update and loss.

Cluster ids are 1-based: row ``j`` of a centroid array belongs to cluster
``j + 1``, and label arrays hold values in ``[1, k]``.
"""

import logging
from typing import List

import numpy as np

from .data import SeedLike

logger = logging.getLogger(__name__)


def squared_distances(points: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """
    Squared Euclidean distance from every point to every centroid.

    Returns
    -------
    np.ndarray
        Array of shape (n, k).
    """
    diff = points[:, np.newaxis, :] - centroids[np.newaxis, :, :]
    return np.einsum("ijk,ijk->ij", diff, diff)


def assign_to_centroids(points: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """
    Label each point with the id of its nearest centroid.

    Ties go to the lowest cluster id.

    Parameters
    ----------
    points : np.ndarray
        Array of shape (n, d).

    centroids : np.ndarray
        Array of shape (k, d), k >= 1.

    Returns
    -------
    np.ndarray
        Integer array of shape (n,) with values in [1, k].
    """
    # argmin returns the first minimum
    return np.argmin(squared_distances(points, centroids), axis=1) + 1


def empty_clusters(labels: np.ndarray, k: int) -> List[int]:
    """Cluster ids in [1, k] that have no points assigned."""
    counts = np.bincount(labels, minlength=k + 1)
    return [cluster for cluster in range(1, k + 1) if counts[cluster] == 0]


def update_centroids(
    points: np.ndarray, labels: np.ndarray, k: int, seed: SeedLike = None
) -> np.ndarray:
    """
    Move each centroid to the mean of its cluster.

    A cluster with no points is re-seeded to a point drawn uniformly from the
    whole data set. There is one draw per empty cluster and no check that the
    new position keeps the cluster populated.

    Parameters
    ----------
    points : np.ndarray
        Array of shape (n, d).

    labels : np.ndarray
        Cluster ids in [1, k], one per point.

    k : int
        Number of clusters. Exactly k centroids are returned even if fewer ids
        occur in ``labels``.

    seed : int, numpy.random.Generator, optional
        Randomness for re-seeding empty clusters.

    Returns
    -------
    np.ndarray
        Array of shape (k, d).
    """
    rng = np.random.default_rng(seed)
    centroids = np.empty((k, points.shape[1]), dtype=float)
    for cluster in range(1, k + 1):
        members = points[labels == cluster]
        if len(members) == 0:
            j = rng.integers(len(points))
            centroids[cluster - 1] = points[j]
            logger.debug("Cluster %d is empty; re-seeded to point %d", cluster, j)
        else:
            centroids[cluster - 1] = members.mean(axis=0)
    return centroids


def compute_wss(points: np.ndarray, centroids: np.ndarray, labels: np.ndarray) -> float:
    """
    Within-cluster sum of squares.

    Sum of squared distances from each point to the centroid of its assigned
    cluster. The value is reported as is; nothing here checks that it went
    down.
    """
    residuals = points - centroids[labels - 1]
    return float(np.sum(residuals * residuals))
