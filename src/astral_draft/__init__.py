"""Astral Draft - fantasy football trade valuation and analysis."""

__version__ = "0.1.0"
