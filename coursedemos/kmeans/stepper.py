# Copyright (c) 2026 coursedemos
# Licensed under the Apache License, Version 2.0

"""
Step-by-step K-means controller.

This module holds the state machine behind the K-means teaching demo. A UI
calls one event method per user action (generate, change K, reset, step) and
renders the snapshot it gets back. Configuration uses the Spark ML ``Params``
API, so parameters have defaults, typed converters, getters and
``explainParams()`` documentation.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

import numpy as np

from pyspark import keyword_only
from pyspark.ml.param import Param, Params, TypeConverters
from pyspark.ml.param.shared import HasMaxIter, HasSeed

from .data import check_generator_args, make_clustered_data
from .errors import InvalidConfiguration
from .lloyd import assign_to_centroids, compute_wss, empty_clusters, update_centroids

logger = logging.getLogger(__name__)


class Phase(Enum):
    """Where the controller is in the K-means run."""

    EMPTY = "empty"
    READY = "ready"
    RUNNING = "running"
    CONVERGED = "converged"


@dataclass(frozen=True)
class RunState:
    """
    Progress of the current K-means run.

    Attributes
    ----------
    k : int
        Number of clusters of this run.

    iteration : int
        0 before the first step, 1 after initialization, +1 per update step.

    loss : float
        Within-cluster sum of squares after the latest step, NaN before the
        first step.

    converged : bool
        True once a step left every assignment unchanged.

    phase : Phase
        State machine phase.

    loss_history : tuple of float
        Loss after each iteration, oldest first.

    reseeded : tuple of int
        Cluster ids re-seeded by the latest centroid update. The loss can go up
        on a step that re-seeds.
    """

    k: int
    iteration: int = 0
    loss: float = math.nan
    converged: bool = False
    phase: Phase = Phase.EMPTY
    loss_history: Tuple[float, ...] = ()
    reseeded: Tuple[int, ...] = ()


@dataclass(frozen=True)
class KMeansSnapshot:
    """
    Everything a renderer needs after an event.

    ``centroids`` and ``labels`` are None until the first step after a
    (re)initialization. All arrays are read-only.
    """

    points: Optional[np.ndarray]
    centroids: Optional[np.ndarray]
    labels: Optional[np.ndarray]
    state: RunState


def _read_only(array: np.ndarray) -> np.ndarray:
    array.flags.writeable = False
    return array


def _check_params(params: "KMeansStepperParams") -> None:
    k = params.getK()
    if k < 1:
        raise InvalidConfiguration(f"k must be >= 1, got {k}")
    num_points = params.getNumPoints()
    check_generator_args(
        num_points, params.getNumBlobs(), params.getSpreadRange(), params.getNoiseProportion()
    )
    if k > num_points:
        raise InvalidConfiguration(
            f"k={k} exceeds numPoints={num_points}; initial centroids are "
            "sampled from the points without replacement"
        )


class KMeansStepperParams(HasMaxIter, HasSeed):
    """
    Params for KMeansStepper.

    Parameters
    ----------
    k : int, default=3
        Number of clusters (>= 1 and at most the number of points).

    numPoints : int, default=260
        Number of generated points.

    numBlobs : int, default=4
        Number of Gaussian blobs in the generated data.

    spreadRange : list of float, default=[1.4, 2.6]
        Range of the blob standard deviations.

    noiseProportion : float, default=0.18
        Share of the points drawn as uniform background noise.

    seed : int, optional
        Random seed for the data set generated on construction and the
        K-means run on it. Later generations take their own seed per call.

    maxIter : int, default=20
        Iteration cap for runUntilConverged.
    """

    k = Param(
        Params._dummy(),
        "k",
        "Number of clusters to create (must be >= 1).",
        typeConverter=TypeConverters.toInt,
    )

    numPoints = Param(
        Params._dummy(),
        "numPoints",
        "Number of points to generate.",
        typeConverter=TypeConverters.toInt,
    )

    numBlobs = Param(
        Params._dummy(),
        "numBlobs",
        "Number of Gaussian blobs in the generated data.",
        typeConverter=TypeConverters.toInt,
    )

    spreadRange = Param(
        Params._dummy(),
        "spreadRange",
        "[min, max] range of the blob standard deviations.",
        typeConverter=TypeConverters.toListFloat,
    )

    noiseProportion = Param(
        Params._dummy(),
        "noiseProportion",
        "Share of points drawn as uniform background noise, in [0, 1].",
        typeConverter=TypeConverters.toFloat,
    )

    def __init__(self, *args):
        super(KMeansStepperParams, self).__init__(*args)
        self._setDefault(
            k=3,
            numPoints=260,
            numBlobs=4,
            spreadRange=[1.4, 2.6],
            noiseProportion=0.18,
            seed=None,
            maxIter=20,
        )

    def getK(self) -> int:
        """Gets the value of k or its default value."""
        return self.getOrDefault(self.k)

    def getNumPoints(self) -> int:
        """Gets the value of numPoints or its default value."""
        return self.getOrDefault(self.numPoints)

    def getNumBlobs(self) -> int:
        """Gets the value of numBlobs or its default value."""
        return self.getOrDefault(self.numBlobs)

    def getSpreadRange(self) -> List[float]:
        """Gets the value of spreadRange or its default value."""
        return self.getOrDefault(self.spreadRange)

    def getNoiseProportion(self) -> float:
        """Gets the value of noiseProportion or its default value."""
        return self.getOrDefault(self.noiseProportion)


class KMeansStepper(KMeansStepperParams):
    """
    K-means that advances one user-triggered step at a time.

    The controller owns the points, centroids, assignment and run state, and
    moves through the phases READY -> RUNNING -> CONVERGED. It is EMPTY only
    while the constructor generates the first data set.

    - ``generate`` replaces the points and goes to READY.
    - ``setK`` and ``reset`` keep the points and go to READY.
    - ``step`` from READY samples K points as centroids and assigns every point
      (iteration 1). From RUNNING it updates the centroids, reassigns and
      checks whether any assignment changed; if none did the run is CONVERGED.
      From CONVERGED it does nothing.

    Every event returns a KMeansSnapshot. Invalid configurations raise
    InvalidConfiguration before anything is changed.

    Examples
    --------
    >>> stepper = KMeansStepper(k=3, seed=42)
    >>> _ = stepper.generate(numPoints=150, numBlobs=3)
    >>> snapshot = stepper.step()
    >>> snapshot.state.iteration
    1
    >>> snapshot = stepper.runUntilConverged()
    >>> snapshot.state.converged
    True
    """

    @keyword_only
    def __init__(
        self,
        *,
        k: int = 3,
        numPoints: int = 260,
        numBlobs: int = 4,
        spreadRange: Tuple[float, float] = (1.4, 2.6),
        noiseProportion: float = 0.18,
        seed: Optional[int] = None,
        maxIter: int = 20,
    ):
        """
        Initialize the controller and generate its first data set.

        The first data set is drawn from ``seed``; the controller is READY
        when this returns.
        """
        super(KMeansStepper, self).__init__()
        kwargs = self._input_kwargs
        candidate = self.copy()._set(**kwargs)
        _check_params(candidate)
        self._set(**kwargs)

        self._rng = None
        self._points = None
        self._clearRun(Phase.EMPTY)
        self.generate(seed=self.getSeed())

    def setMaxIter(self, value: int):
        """Sets the value of maxIter."""
        return self._set(maxIter=value)

    @keyword_only
    def generate(
        self,
        *,
        numPoints: Optional[int] = None,
        numBlobs: Optional[int] = None,
        spreadRange: Optional[Tuple[float, float]] = None,
        noiseProportion: Optional[float] = None,
        seed: Optional[int] = None,
    ) -> KMeansSnapshot:
        """
        Replace the points with a freshly generated data set.

        Data arguments that are given become the new param values; the others
        keep their current values. ``seed`` applies to this call only: without
        it the points come from fresh entropy. A seed also drives the random
        choices of the K-means run on the new points, so a seeded generate
        followed by the same steps always gives the same run.

        Raises
        ------
        InvalidConfiguration
            If the params are out of range or k exceeds numPoints.
        """
        kwargs = dict(self._input_kwargs)
        seed = kwargs.pop("seed", None)
        kwargs = {name: value for name, value in kwargs.items() if value is not None}
        candidate = self.copy()._set(**kwargs)
        _check_params(candidate)

        rng = np.random.default_rng(seed)
        points = make_clustered_data(
            n=candidate.getNumPoints(),
            blobs=candidate.getNumBlobs(),
            spread_range=candidate.getSpreadRange(),
            noise_proportion=candidate.getNoiseProportion(),
            seed=rng,
        )

        self._set(**kwargs)
        self._rng = rng
        self._points = points
        self._clearRun(Phase.READY)
        logger.info(
            "Generated %d points from %d blobs (noise %.2f)",
            len(points),
            self.getNumBlobs(),
            self.getNoiseProportion(),
        )
        return self.getRenderState()

    def setK(self, value: int) -> KMeansSnapshot:
        """
        Change the number of clusters and restart the run on the same points.

        Raises
        ------
        InvalidConfiguration
            If value < 1 or value exceeds the number of points.
        """
        candidate = self.copy()._set(k=value)
        k = candidate.getK()
        if k < 1:
            raise InvalidConfiguration(f"k must be >= 1, got {k}")
        n = len(self._points)
        if k > n:
            raise InvalidConfiguration(f"k={k} exceeds the {n} available points")

        self._set(k=k)
        self._clearRun(Phase.READY)
        logger.debug("k set to %d", k)
        return self.getRenderState()

    def reset(self) -> KMeansSnapshot:
        """Restart the run on the same points."""
        self._clearRun(Phase.READY)
        logger.debug("Run reset")
        return self.getRenderState()

    def step(self) -> KMeansSnapshot:
        """
        Advance the run by one step and return the new snapshot.

        A converged run is left untouched.
        """
        phase = self._state.phase
        if phase is Phase.READY:
            self._initialize()
        elif phase is Phase.RUNNING:
            self._iterate()
        return self.getRenderState()

    def runUntilConverged(self) -> KMeansSnapshot:
        """
        Step until the run converges or reaches maxIter iterations.

        Returns
        -------
        KMeansSnapshot
            The snapshot after the last step; check ``state.converged``.
        """
        snapshot = self.getRenderState()
        while not snapshot.state.converged and snapshot.state.iteration < self.getMaxIter():
            snapshot = self.step()
        return snapshot

    def getRenderState(self) -> KMeansSnapshot:
        """Current points, centroids, labels and run state."""
        return KMeansSnapshot(
            points=self._points,
            centroids=self._centroids,
            labels=self._labels,
            state=self._state,
        )

    def _clearRun(self, phase: Phase) -> None:
        self._centroids = None
        self._labels = None
        self._state = RunState(k=self.getK(), phase=phase)

    def _initialize(self) -> None:
        k = self.getK()
        n = len(self._points)
        idx = self._rng.choice(n, size=k, replace=False)
        centroids = self._points[idx].copy()
        labels = assign_to_centroids(self._points, centroids)
        loss = compute_wss(self._points, centroids, labels)

        self._centroids = _read_only(centroids)
        self._labels = _read_only(labels)
        self._state = RunState(
            k=k,
            iteration=1,
            loss=loss,
            phase=Phase.RUNNING,
            loss_history=(loss,),
        )
        logger.debug("Initialized %d centroids from points %s (loss %.3f)", k, idx.tolist(), loss)

    def _iterate(self) -> None:
        state = self._state
        previous = self._labels

        reseeded = tuple(empty_clusters(previous, state.k))
        centroids = update_centroids(self._points, previous, state.k, seed=self._rng)
        labels = assign_to_centroids(self._points, centroids)
        loss = compute_wss(self._points, centroids, labels)
        converged = bool(np.array_equal(previous, labels))

        self._centroids = _read_only(centroids)
        self._labels = _read_only(labels)
        self._state = RunState(
            k=state.k,
            iteration=state.iteration + 1,
            loss=loss,
            converged=converged,
            phase=Phase.CONVERGED if converged else Phase.RUNNING,
            loss_history=state.loss_history + (loss,),
            reseeded=reseeded,
        )
        logger.debug("Iteration %d: loss %.3f", self._state.iteration, loss)
        if converged:
            logger.info(
                "Converged after %d iterations (loss %.3f)", self._state.iteration, loss
            )
