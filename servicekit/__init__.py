"""HTTP service skeleton with YAML configuration, logging, Redis and utility helpers."""

__version__ = "1.0.0"