# Copyright (c) 2026 coursedemos
# Licensed under the Apache License, Version 2.0

"""Exceptions raised by the K-means stepper."""


class InvalidConfiguration(ValueError):
    """A cluster count or data generation parameter cannot be used."""
