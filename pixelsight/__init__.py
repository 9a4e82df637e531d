"""PixelSight — offline heuristic image characterization and comparison."""

__version__ = "0.1.0"
