"""ArtBuddy: customer, commission, and iteration tracking for artists."""

__version__ = "0.1.0"
