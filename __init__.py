"""Theater statements: per-performance pricing, volume credits and statement text."""

__version__ = "0.1.0"
