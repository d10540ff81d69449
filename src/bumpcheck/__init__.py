"""bumpcheck - semantic version change detection between two code snapshots."""

__version__ = "0.1.0"
