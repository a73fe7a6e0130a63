#!/usr/bin/env python
# Copyright (c) 2026 coursedemos
# Licensed under the Apache License, Version 2.0

"""
Plot successive K-means steps side by side.

Requires the ``examples`` extra (matplotlib).
"""

import matplotlib.pyplot as plt

from coursedemos.kmeans import KMeansStepper, centroid_labels, plot_limits


def draw(ax, snapshot):
    (xmin, xmax), (ymin, ymax) = plot_limits(snapshot.points)
    ax.set_xlim(xmin, xmax)
    ax.set_ylim(ymin, ymax)
    ax.axhline(0, linestyle=":", color="0.7")
    ax.axvline(0, linestyle=":", color="0.7")

    state = snapshot.state
    if snapshot.centroids is None:
        ax.scatter(snapshot.points[:, 0], snapshot.points[:, 1], s=10, color="0.2")
        ax.set_title("Before K-means")
        return

    colors = plt.get_cmap("Dark2").colors[: state.k]
    point_colors = [colors[label - 1] for label in snapshot.labels]
    ax.scatter(snapshot.points[:, 0], snapshot.points[:, 1], s=10, c=point_colors)
    for label, color, (x, y) in zip(centroid_labels(state.k), colors, snapshot.centroids):
        ax.scatter([x], [y], marker="*", s=250, color=color, edgecolors="k")
        ax.annotate(label, (x, y), textcoords="offset points", xytext=(0, 8), ha="center")

    title = f"Iteration {state.iteration}, loss {state.loss:.1f}"
    if state.converged:
        title += " (converged)"
    ax.set_title(title)


def main():
    stepper = KMeansStepper(k=4, seed=7, maxIter=50)
    snapshots = [stepper.getRenderState()]
    snapshot = stepper.step()
    snapshots.append(snapshot)
    while not snapshot.state.converged and snapshot.state.iteration < stepper.getMaxIter():
        snapshot = stepper.step()
        snapshots.append(snapshot)

    # First two steps, then the converged state
    shown = snapshots[:3] + snapshots[-1:] if len(snapshots) > 4 else snapshots
    fig, axes = plt.subplots(1, len(shown), figsize=(5 * len(shown), 5))
    for ax, shot in zip(axes, shown):
        draw(ax, shot)

    plt.tight_layout()
    output_path = "/tmp/kmeans_steps.png"
    plt.savefig(output_path, dpi=100, bbox_inches="tight")
    print(f"Visualization saved to: {output_path}")


if __name__ == "__main__":
    main()
