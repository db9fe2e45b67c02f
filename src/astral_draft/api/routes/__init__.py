"""API route handlers."""

from astral_draft.api.routes import (
    trade_analyzer,
    trade_review,
    valuation,
    viz,
)

__all__ = [
    "valuation",
    "trade_analyzer",
    "trade_review",
    "viz",
]
