"""Resource naming and predictive unit graph model for Seldon deployments."""

__version__ = "0.1.0"
