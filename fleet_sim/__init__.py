"""Camera fleet simulator - in-memory fleet model with fault injection."""

__version__ = "0.1.0"
