"""orbitgate: pre-merge syntax and lint-threshold validation gate."""

__version__ = "0.1.0"
