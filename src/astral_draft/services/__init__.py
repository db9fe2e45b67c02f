"""Business logic services."""

from astral_draft.services.advisor import (
    generate_trade_advice,
    validate_trade_constraints,
)
from astral_draft.services.aggregator import calculate_grade, fairness_score
from astral_draft.services.impact import (
    analyze_position_impact,
    calculate_win_probability_impact,
)
from astral_draft.services.suggestions import (
    analyze_team_needs,
    generate_trade_suggestions,
    is_starter,
)
from astral_draft.services.trade_analyzer import analyze_trade
from astral_draft.services.valuation import (
    roster_strength,
    valuate_asset,
    valuate_bundle,
    valuate_pick,
    valuate_player,
)

__all__ = [
    # Valuation
    "roster_strength",
    "valuate_asset",
    "valuate_bundle",
    "valuate_pick",
    "valuate_player",
    # Aggregation
    "calculate_grade",
    "fairness_score",
    # Impact
    "analyze_position_impact",
    "calculate_win_probability_impact",
    # Advice
    "analyze_trade",
    "generate_trade_advice",
    "validate_trade_constraints",
    # Suggestions
    "analyze_team_needs",
    "generate_trade_suggestions",
    "is_starter",
]
