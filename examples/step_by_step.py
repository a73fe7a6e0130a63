#!/usr/bin/env python
# Copyright (c) 2026 coursedemos
# Licensed under the Apache License, Version 2.0

"""
Walk through a K-means run in the console, one step at a time.
"""

import logging

from coursedemos.kmeans import KMeansStepper, centroid_labels, status_report
from coursedemos.logging_config import setup_logging


def main():
    setup_logging(logging.INFO)

    # Same defaults as the classroom demo: 260 points, 4 blobs, 18% noise
    stepper = KMeansStepper(k=3, seed=42)

    # The stepper generates its first points on construction
    snapshot = stepper.getRenderState()
    print(status_report(snapshot))

    print("\nStepping K-means until assignments stop changing:\n")
    snapshot = stepper.step()
    while True:
        print(f"--- iteration {snapshot.state.iteration} ---")
        print(status_report(snapshot))
        for label, (x, y) in zip(centroid_labels(snapshot.state.k), snapshot.centroids):
            print(f"  {label}: ({x:.3f}, {y:.3f})")
        print()
        if snapshot.state.converged:
            break
        snapshot = stepper.step()

    print("Loss per iteration:")
    for iteration, loss in enumerate(snapshot.state.loss_history, start=1):
        print(f"  {iteration:>2}: {loss:.3f}")

    # Changing K keeps the points and restarts the run
    print("\nSwitching to K=5 on the same points...")
    stepper.setK(5)
    snapshot = stepper.runUntilConverged()
    print(status_report(snapshot))


if __name__ == "__main__":
    main()
