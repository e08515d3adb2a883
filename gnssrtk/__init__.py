"""GNSS time systems, observation screening, single differencing and single-point positioning."""

__version__ = "0.1.0"