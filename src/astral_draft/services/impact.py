"""
Trade Impact Analysis

Positional depth changes and a roster-strength proxy for win probability.
"""

import logging

from astral_draft.models.league import LeagueSettings
from astral_draft.models.player import Player, Position
from astral_draft.models.trade import PositionImpact, WinProbabilityImpact
from astral_draft.services.valuation import roster_strength

logger = logging.getLogger(__name__)

TRACKED_POSITIONS = [
    Position.QB,
    Position.RB,
    Position.WR,
    Position.TE,
    Position.K,
    Position.DEF,
]


def _count_at(players: list[Player], position: Position) -> int:
    return sum(1 for p in players if p.position == position)


def analyze_position_impact(
    current_roster: list[Player],
    players_lost: list[Player],
    players_gained: list[Player],
) -> PositionImpact:
    """
    Analyze how a trade changes one team's positional depth.

    Args:
        current_roster: Team's roster before the trade
        players_lost: Players the team sends away
        players_gained: Players the team takes on

    Returns:
        PositionImpact with improved/weakened positions and new depth counts
    """
    improved: list[Position] = []
    weakened: list[Position] = []
    depth: dict[Position, int] = {}

    for position in TRACKED_POSITIONS:
        current = _count_at(current_roster, position)
        lost = _count_at(players_lost, position)
        gained = _count_at(players_gained, position)

        depth[position] = current - lost + gained

        if gained > lost:
            improved.append(position)
        elif lost > gained:
            weakened.append(position)

    return PositionImpact(improved=improved, weakened=weakened, depth=depth)


def _roster_after_trade(
    roster: list[Player], outgoing: list[Player], incoming: list[Player]
) -> list[Player]:
    outgoing_ids = {p.id for p in outgoing}
    return [p for p in roster if p.id not in outgoing_ids] + list(incoming)


def _strength_change(old_strength: int, new_strength: int) -> float:
    # A roster with no valued players has no baseline to compare against
    if old_strength == 0:
        logger.debug("Roster strength is 0, reporting no win probability change")
        return 0.0
    return (new_strength - old_strength) / old_strength * 100


def calculate_win_probability_impact(
    initiator_roster: list[Player],
    partner_roster: list[Player],
    initiator_gives: list[Player],
    initiator_receives: list[Player],
    settings: LeagueSettings,
) -> WinProbabilityImpact:
    """
    Estimate each side's change in win probability, in percent.

    This is a relative roster-strength proxy (sum of player values before
    and after), not a calibrated probability model.
    """
    initiator_old = roster_strength(initiator_roster, settings)
    initiator_new = roster_strength(
        _roster_after_trade(initiator_roster, initiator_gives, initiator_receives),
        settings,
    )

    partner_old = roster_strength(partner_roster, settings)
    partner_new = roster_strength(
        _roster_after_trade(partner_roster, initiator_receives, initiator_gives),
        settings,
    )

    return WinProbabilityImpact(
        initiator=_strength_change(initiator_old, initiator_new),
        partner=_strength_change(partner_old, partner_new),
    )
