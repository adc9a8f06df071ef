"""MIC-1 microarchitecture simulator with a small IJVM-subset compiler."""

__version__ = "0.1.0"

__all__ = ["__version__"]