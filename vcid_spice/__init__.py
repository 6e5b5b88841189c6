"""Circuit description, node roles and an iterative operating-point solver."""

__version__ = "0.1.0"
__all__ = ["circuit", "role", "op", "cli"]