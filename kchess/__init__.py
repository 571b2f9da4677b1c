"""Console chess for two players, with full move rules, and a small text car race."""

__version__ = "0.1.0"