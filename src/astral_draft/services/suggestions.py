"""
Trade Suggestions

Finds one-for-one swaps where each team trades bench depth for a
position the other team is short at.
"""

import logging

from astral_draft.models.league import LeagueSettings
from astral_draft.models.player import Player, Position, TradeBundle
from astral_draft.models.trade import TradeSuggestion
from astral_draft.services.trade_analyzer import analyze_trade

logger = logging.getLogger(__name__)

# Minimum players a roster should carry at each position
POSITION_MINIMUMS: dict[Position, int] = {
    Position.QB: 2,
    Position.RB: 4,
    Position.WR: 4,
    Position.TE: 2,
    Position.K: 1,
    Position.DEF: 1,
}

# Players ranked within these counts at their position are starters
STARTER_COUNTS: dict[Position, int] = {
    Position.QB: 1,
    Position.RB: 2,
    Position.WR: 2,
    Position.TE: 1,
    Position.K: 1,
    Position.DEF: 1,
}
DEFAULT_STARTER_COUNT = 1

MIN_SUGGESTION_FAIRNESS = 40
MAX_SUGGESTIONS = 5


def _projection(player: Player) -> float:
    return player.projected_points or 0.0


def analyze_team_needs(roster: list[Player]) -> list[Position]:
    """Positions where a roster carries fewer players than the minimum."""
    counts: dict[Position, int] = {}
    for player in roster:
        counts[player.position] = counts.get(player.position, 0) + 1

    return [
        position
        for position, minimum in POSITION_MINIMUMS.items()
        if counts.get(position, 0) < minimum
    ]


def is_starter(player: Player, roster: list[Player]) -> bool:
    """
    Check whether a player would start, ranking by projected points
    against others at the same position.
    """
    same_position = sorted(
        (p for p in roster if p.position == player.position),
        key=_projection,
        reverse=True,
    )
    starter_count = STARTER_COUNTS.get(player.position, DEFAULT_STARTER_COUNT)

    rank = next(
        (i for i, p in enumerate(same_position) if p.id == player.id),
        len(same_position),
    )
    return rank < starter_count


def tradeable_players(roster: list[Player], position: Position) -> list[Player]:
    """Bench players at a position, weakest projection first."""
    bench = [
        p for p in roster if p.position == position and not is_starter(p, roster)
    ]
    return sorted(bench, key=_projection)


def generate_trade_suggestions(
    my_roster: list[Player],
    target_roster: list[Player],
    settings: LeagueSettings,
) -> list[TradeSuggestion]:
    """
    Suggest mutually beneficial swaps between two rosters.

    For each of my needs paired with each of the target's needs, offer my
    weakest bench player at the target's need for the target's weakest
    bench player at mine.

    Returns:
        Up to 5 suggestions, fairest first
    """
    my_needs = analyze_team_needs(my_roster)
    target_needs = analyze_team_needs(target_roster)

    suggestions: list[TradeSuggestion] = []

    for my_need in my_needs:
        for target_need in target_needs:
            my_tradeable = tradeable_players(my_roster, target_need)
            target_tradeable = tradeable_players(target_roster, my_need)

            if not my_tradeable or not target_tradeable:
                continue

            give = [my_tradeable[0]]
            receive = [target_tradeable[0]]

            analysis = analyze_trade(
                TradeBundle(players=give),
                TradeBundle(players=receive),
                my_roster,
                target_roster,
                settings,
            )

            if analysis.fairness_score > MIN_SUGGESTION_FAIRNESS:
                suggestions.append(
                    TradeSuggestion(
                        give=give,
                        receive=receive,
                        reasoning=(
                            f"Trade depth at {target_need.value} "
                            f"for need at {my_need.value}"
                        ),
                        fairness_score=analysis.fairness_score,
                    )
                )

    suggestions.sort(key=lambda s: s.fairness_score, reverse=True)
    logger.debug("Generated %d trade suggestions", len(suggestions))
    return suggestions[:MAX_SUGGESTIONS]
