"""Dining philosophers simulation: argument parsing, the shared table, the threads and the command line."""

__version__ = "1.0.0"