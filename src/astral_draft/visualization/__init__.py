"""Plotly chart generation."""
