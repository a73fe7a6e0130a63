# Copyright (c) 2026 coursedemos
# Licensed under the Apache License, Version 2.0

"""
Step-by-step K-means
====================

A K-means run that a teaching UI advances one click at a time, on synthetic
2-D data made of Gaussian blobs and background noise.

Classes:
    KMeansStepper: State machine owning points, centroids and assignments
    KMeansSnapshot: What a renderer gets back after every event
    RunState: Iteration, loss and convergence of the current run

Example:
    >>> from coursedemos.kmeans import KMeansStepper, status_report
    >>>
    >>> stepper = KMeansStepper(k=3, seed=7)
    >>> stepper.generate(numPoints=200, numBlobs=3)
    >>>
    >>> # First step picks random centroids and assigns the points
    >>> snapshot = stepper.step()
    >>> print(status_report(snapshot))
    >>>
    >>> # Each further step updates centroids and reassigns
    >>> while not snapshot.state.converged:
    ...     snapshot = stepper.step()
"""

from .data import make_clustered_data
from .errors import InvalidConfiguration
from .lloyd import assign_to_centroids, compute_wss, empty_clusters, update_centroids
from .report import centroid_labels, plot_limits, status_report
from .stepper import KMeansSnapshot, KMeansStepper, KMeansStepperParams, Phase, RunState

__all__ = [
    "InvalidConfiguration",
    "KMeansSnapshot",
    "KMeansStepper",
    "KMeansStepperParams",
    "Phase",
    "RunState",
    "assign_to_centroids",
    "centroid_labels",
    "compute_wss",
    "empty_clusters",
    "make_clustered_data",
    "plot_limits",
    "status_report",
    "update_centroids",
]
