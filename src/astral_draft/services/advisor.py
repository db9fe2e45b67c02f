"""
Trade Advisor

Structural trade validation and human-readable trade advice.
"""

import logging
from datetime import datetime, timezone

from astral_draft.models.league import TradeConstraints
from astral_draft.models.player import Player, Position, TradeBundle, Trend
from astral_draft.models.trade import PositionImpact, TradeValidationResult

logger = logging.getLogger(__name__)

# Fairness bands
LOPSIDED_FAIRNESS = 30
UNEVEN_FAIRNESS = 50
FAIR_TRADE_FAIRNESS = 70

# Minimum post-trade depth before a weakened position is flagged
MIN_RB_DEPTH = 4
MIN_WR_DEPTH = 4
MIN_QB_DEPTH = 2


def as_aware(moment: datetime) -> datetime:
    """Read a naive datetime as UTC; aware datetimes pass through."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def validate_trade_constraints(
    initiator_roster: list[Player],
    partner_roster: list[Player],
    given_ids: list[str],
    received_ids: list[str],
    constraints: TradeConstraints,
    now: datetime | None = None,
) -> TradeValidationResult:
    """
    Check a trade against league rules before it is committed.

    Args:
        initiator_roster: Initiator's current roster
        partner_roster: Partner's current roster
        given_ids: Player IDs the initiator gives away
        received_ids: Player IDs the initiator receives
        constraints: League trade rules
        now: Evaluation time, defaults to the current time. Naive
            datetimes on either side are read as UTC

    Returns:
        TradeValidationResult listing every violated rule
    """
    errors: list[str] = []

    deadline = constraints.trade_deadline
    if deadline is not None:
        now = datetime.now(timezone.utc) if now is None else as_aware(now)
        if now > as_aware(deadline):
            errors.append("Trade deadline has passed")

    max_size = constraints.max_roster_size
    initiator_new_size = len(initiator_roster) - len(given_ids) + len(received_ids)
    partner_new_size = len(partner_roster) - len(received_ids) + len(given_ids)

    if initiator_new_size > max_size:
        errors.append(f"Trade would exceed initiator's maximum roster size of {max_size}")
    if partner_new_size > max_size:
        errors.append(f"Trade would exceed partner's maximum roster size of {max_size}")

    initiator_ids = {p.id for p in initiator_roster}
    partner_ids = {p.id for p in partner_roster}

    keeping_ids = initiator_ids - set(given_ids)
    if any(pid in keeping_ids for pid in received_ids):
        errors.append("Cannot trade for players already on roster")

    if any(pid not in initiator_ids for pid in given_ids):
        errors.append("Cannot trade players not on roster")

    if any(pid not in partner_ids for pid in received_ids):
        errors.append("Partner does not own all players being received")

    if errors:
        logger.debug("Trade failed validation: %s", "; ".join(errors))

    return TradeValidationResult(valid=not errors, errors=errors)


def _is_buy_low(player: Player) -> bool:
    perf = player.recent_performance
    if perf is None or player.projected_points is None:
        return False
    return perf.trend == Trend.DOWN and player.projected_points > perf.average_points


def generate_trade_advice(
    fairness_score: float,
    initiator_impact: PositionImpact,
    partner_impact: PositionImpact,
    initiator_gives: TradeBundle,
    initiator_receives: TradeBundle,
) -> tuple[list[str], list[str]]:
    """
    Generate recommendations and warnings for the trade initiator.

    Advice never blocks a trade. The partner's impact is accepted for
    symmetry with the analysis but only the initiator is advised.

    Returns:
        (recommendations, warnings)
    """
    recommendations: list[str] = []
    warnings: list[str] = []

    if fairness_score < LOPSIDED_FAIRNESS:
        warnings.append(
            "This trade appears very lopsided and may be vetoed by league members"
        )
    elif fairness_score < UNEVEN_FAIRNESS:
        warnings.append("This trade favors one side significantly")

    weakened = initiator_impact.weakened
    depth = initiator_impact.depth
    if Position.RB in weakened and depth.get(Position.RB, 0) < MIN_RB_DEPTH:
        warnings.append("Trade leaves initiator thin at RB position")
    if Position.WR in weakened and depth.get(Position.WR, 0) < MIN_WR_DEPTH:
        warnings.append("Trade leaves initiator thin at WR position")
    if Position.QB in weakened and depth.get(Position.QB, 0) < MIN_QB_DEPTH:
        warnings.append("Trade leaves initiator without QB depth")

    injured = [p for p in initiator_receives.players if p.is_injured]
    if injured:
        warnings.append(f"Receiving {len(injured)} injured player(s)")

    if Position.RB in initiator_impact.improved:
        recommendations.append("Trade improves RB depth, a critical position")
    if initiator_receives.picks:
        recommendations.append("Acquiring draft capital for future team building")
    if fairness_score > FAIR_TRADE_FAIRNESS:
        recommendations.append(
            "This appears to be a fair trade that could benefit both teams"
        )

    buy_low = [p for p in initiator_receives.players if _is_buy_low(p)]
    if buy_low:
        recommendations.append(
            f"Acquiring {len(buy_low)} potential buy-low candidate(s)"
        )

    return recommendations, warnings
