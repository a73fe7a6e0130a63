#!/usr/bin/env python
# Copyright (c) 2026 coursedemos
# Licensed under the Apache License, Version 2.0

"""
Setup configuration for the coursedemos-kmeans package.
"""

from setuptools import setup, find_packages
import os

# Read version from package
with open(os.path.join("coursedemos", "__init__.py")) as f:
    for line in f:
        if line.startswith("__version__"):
            version = line.split("=")[1].strip().strip('"').strip("'")
            break

# Read long description from README
long_description = """
# Course Demos: K-means, step by step

A K-means engine built for teaching. Instead of fitting in one call, the run
advances one user-triggered step at a time so a UI can show every
initialization, assignment and centroid update.

## Features

- **Synthetic Data**: Gaussian blobs mixed with uniform background noise
- **Explicit State Machine**: Empty, Ready, Running and Converged phases
- **Exact Convergence**: a run stops when no point changes cluster
- **Empty Cluster Re-seeding**: empty clusters jump to a random point
- **Spark ML Params**: typed, documented configuration with defaults

## Installation

```bash
pip install coursedemos-kmeans
```

## Quick Start

```python
from coursedemos.kmeans import KMeansStepper, status_report

stepper = KMeansStepper(k=3, seed=42)
stepper.generate(numPoints=200, numBlobs=3)

snapshot = stepper.step()          # random centroids + first assignment
while not snapshot.state.converged:
    snapshot = stepper.step()      # update centroids, reassign

print(status_report(snapshot))
```
"""

setup(
    name="coursedemos-kmeans",
    version=version,
    description="Step-by-step K-means engine for interactive teaching demos",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Course Demos",
    license="Apache License 2.0",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    python_requires=">=3.8",
    install_requires=[
        "pyspark>=3.4.0",
        "numpy>=1.20.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=3.0.0",
            "black>=22.0.0",
            "flake8>=4.0.0",
            "mypy>=0.950",
        ],
        "examples": [
            "matplotlib>=3.5.0",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Education",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Education",
        "Topic :: Scientific/Engineering",
    ],
    keywords="kmeans clustering teaching visualization",
)
