"""Dynamic-programming solvers for counting, grid and sequence problems, with a command line."""

__version__ = "0.1.0"
__all__ = ["__version__"]