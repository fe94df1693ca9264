"""Exact solvers for classic recreational mathematics problems."""

__version__ = "0.1.0"