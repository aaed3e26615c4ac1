"""Solutions to classic programming-contest problems, as functions and commands."""

__version__ = "0.1.0"