"""Andy -- interactive Android project scaffolder."""

__version__ = "0.4.0"
