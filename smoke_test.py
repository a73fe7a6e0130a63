#!/usr/bin/env python3
"""
Smoke test for the step-by-step K-means engine.

Goals:
- Prove import and an end-to-end generate/step/converge cycle
- Validate snapshot shapes, label range, determinism by seed, and reset/K-change
- Keep it FAST and self-contained for CI
"""

import math

import numpy as np


def _assert(cond, msg):
    if not cond:
        raise AssertionError(msg)


def main():
    print("Starting smoke test…")

    try:
        # 1) Import the public API
        try:
            from coursedemos.kmeans import (
                InvalidConfiguration,
                KMeansStepper,
                Phase,
                status_report,
            )
        except Exception as ie:
            raise ImportError(
                "Failed to import coursedemos.kmeans. "
                "Ensure the package is installed (pip install -e .)."
            ) from ie
        print("✓ Imported KMeansStepper")

        # 2) Generate points
        stepper = KMeansStepper(k=3, numPoints=120, numBlobs=3, seed=42, maxIter=50)
        snapshot = stepper.getRenderState()
        _assert(snapshot.points.shape == (120, 2), f"Unexpected points shape {snapshot.points.shape}")
        _assert(snapshot.state.phase is Phase.READY, "A new stepper must be READY")
        print("✓ Generated 120 points")

        # 3) First step initializes
        snapshot = stepper.step()
        _assert(snapshot.state.iteration == 1, "First step must set iteration 1")
        _assert(snapshot.centroids.shape == (3, 2), "Expected 3 centroids")
        labels = snapshot.labels
        _assert(labels.min() >= 1 and labels.max() <= 3, f"Labels out of range: {np.unique(labels)}")
        _assert(math.isfinite(snapshot.state.loss) and snapshot.state.loss >= 0, "Invalid loss")
        print(f"✓ Initialized, loss={snapshot.state.loss:.3f}")

        # 4) Run to convergence, then confirm a further step is a no-op
        snapshot = stepper.runUntilConverged()
        _assert(snapshot.state.converged, "Run did not converge within maxIter")
        again = stepper.step()
        _assert(again.state == snapshot.state, "Step after convergence changed the state")
        print(f"✓ Converged after {snapshot.state.iteration} iterations")
        print(status_report(snapshot))

        # 5) Determinism (same seed → same run)
        twin = KMeansStepper(k=3, numPoints=120, numBlobs=3, seed=42, maxIter=50)
        twin_snapshot = twin.runUntilConverged()
        _assert(
            np.array_equal(twin_snapshot.labels, snapshot.labels),
            "Determinism check failed: different labels with same seed",
        )
        print("✓ Determinism OK (same seed)")

        # 6) Reset and K change keep the points
        points = snapshot.points
        reset = stepper.reset()
        _assert(reset.points is points and reset.centroids is None, "reset must keep points only")
        changed = stepper.setK(4)
        _assert(changed.state.k == 4 and changed.labels is None, "setK must restart the run")
        print("✓ Reset and K change OK")

        # 7) Invalid K is rejected without touching the state
        try:
            stepper.setK(0)
            raise AssertionError("setK(0) should fail")
        except InvalidConfiguration:
            _assert(stepper.getK() == 4, "Rejected k changed the params")
        print("✓ Invalid configuration rejected")

        print("\n✅ Smoke tests passed")
        return 0

    except Exception as e:
        import traceback
        print(f"\n❌ Smoke test failed: {e}")
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
