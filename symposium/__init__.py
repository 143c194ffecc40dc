"""Dining philosophers simulation: a table with per-fork locks, or a shared pool of forks."""

__version__ = "0.1.0"