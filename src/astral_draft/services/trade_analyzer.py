"""
Trade Analysis Service

Runs a proposed trade through valuation, aggregation, impact analysis
and advice in a single pass.
"""

import logging

from astral_draft.models.league import LeagueSettings
from astral_draft.models.player import Player, TradeBundle
from astral_draft.models.trade import SideImpact, TradeAnalysis
from astral_draft.services.advisor import generate_trade_advice
from astral_draft.services.aggregator import calculate_grade, fairness_score
from astral_draft.services.impact import (
    analyze_position_impact,
    calculate_win_probability_impact,
)
from astral_draft.services.valuation import valuate_bundle

logger = logging.getLogger(__name__)


def analyze_trade(
    initiator_gives: TradeBundle,
    initiator_receives: TradeBundle,
    initiator_roster: list[Player],
    partner_roster: list[Player],
    settings: LeagueSettings,
) -> TradeAnalysis:
    """
    Analyze trade fairness and impact for both teams.

    The partner's side is the mirror of the initiator's: the partner gives
    what the initiator receives and receives what the initiator gives.

    Args:
        initiator_gives: Assets the initiator sends away
        initiator_receives: Assets the initiator takes on
        initiator_roster: Initiator's roster before the trade
        partner_roster: Partner's roster before the trade
        settings: League snapshot

    Returns:
        TradeAnalysis for the proposed trade
    """
    gives_value = valuate_bundle(initiator_gives, settings)
    receives_value = valuate_bundle(initiator_receives, settings)

    fairness = fairness_score(receives_value, gives_value)

    initiator_impact = analyze_position_impact(
        initiator_roster, initiator_gives.players, initiator_receives.players
    )
    partner_impact = analyze_position_impact(
        partner_roster, initiator_receives.players, initiator_gives.players
    )

    win_probability = calculate_win_probability_impact(
        initiator_roster,
        partner_roster,
        initiator_gives.players,
        initiator_receives.players,
        settings,
    )

    recommendations, warnings = generate_trade_advice(
        fairness,
        initiator_impact,
        partner_impact,
        initiator_gives,
        initiator_receives,
    )

    logger.info(
        "Analyzed trade: initiator receives %d, partner receives %d, fairness %.1f",
        receives_value,
        gives_value,
        fairness,
    )

    return TradeAnalysis(
        initiator_value=receives_value,
        partner_value=gives_value,
        fairness_score=fairness,
        initiator_grade=calculate_grade(receives_value, gives_value),
        partner_grade=calculate_grade(gives_value, receives_value),
        win_probability_impact=win_probability,
        position_impact=SideImpact(initiator=initiator_impact, partner=partner_impact),
        recommendations=recommendations,
        warnings=warnings,
    )
