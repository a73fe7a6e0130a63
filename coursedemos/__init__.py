# Copyright (c) 2026 coursedemos
# Licensed under the Apache License, Version 2.0

"""
Course Demos
============

Interactive teaching demos for an introductory data science course.
"""

__version__ = "0.1.0"
__all__ = ["kmeans"]
