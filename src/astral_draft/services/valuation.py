"""
Player and Draft Pick Valuation

Converts roster assets into scalar trade values for a league snapshot.
All functions are pure: same inputs, same value.
"""

import logging
import math

from astral_draft.models.league import LeagueSettings
from astral_draft.models.player import (
    DraftPick,
    InjuryStatus,
    Player,
    Position,
    RosterAsset,
    TradeBundle,
)
from astral_draft.models.trade import AssetValue, BundleValuation

logger = logging.getLogger(__name__)

# Regular season length used for the remaining-season fraction
SEASON_WEEKS = 17

# Number of completed games averaged for the performance base value
RECENT_GAMES = 5
RECENT_POINTS_SCALE = 10

INJURY_MULTIPLIERS: dict[InjuryStatus, float] = {
    InjuryStatus.ACTIVE: 1.0,
    InjuryStatus.QUESTIONABLE: 0.85,
    InjuryStatus.DOUBTFUL: 0.5,
    InjuryStatus.OUT: 0.3,
    InjuryStatus.IR: 0.1,
    InjuryStatus.SUSPENDED: 0.2,
}

POSITION_SCARCITY: dict[Position, float] = {
    Position.QB: 1.2,
    Position.RB: 1.3,
    Position.WR: 1.0,
    Position.TE: 1.15,
    Position.K: 0.5,
    Position.DEF: 0.6,
    Position.FLEX: 0.9,
}

PPR_POSITIONS = frozenset({Position.WR, Position.RB, Position.TE})
PPR_BONUS = 1.1

# Base pick values by round (10-team league)
DRAFT_PICK_VALUES: dict[int, int] = {
    1: 1000,
    2: 700,
    3: 500,
    4: 350,
    5: 250,
    6: 180,
    7: 130,
    8: 90,
    9: 60,
    10: 40,
    11: 25,
    12: 15,
    13: 10,
    14: 5,
    15: 3,
    16: 1,
}
MIN_PICK_VALUE = 1
FUTURE_PICK_DISCOUNT = 0.85
MIDSEASON_WEEK = 8
MIDSEASON_PICK_PREMIUM = 1.2


def round_value(value: float) -> int:
    """Round half up to the nearest integer."""
    return math.floor(value + 0.5)


def injury_multiplier(status: InjuryStatus | None) -> float:
    """Get the value multiplier for an injury status (unlisted = healthy)."""
    if status is None:
        return 1.0
    return INJURY_MULTIPLIERS.get(status, 1.0)


def position_scarcity(position: Position) -> float:
    """Get the scarcity multiplier for a position."""
    return POSITION_SCARCITY.get(position, 1.0)


def remaining_season_fraction(current_week: int) -> float:
    """Fraction of the regular season still to be played, never negative."""
    return max(0, SEASON_WEEKS - current_week) / SEASON_WEEKS


def valuate_player(player: Player, settings: LeagueSettings) -> int:
    """
    Calculate a player's trade value.

    Blends recent production with rest-of-season projections, then adjusts
    for injury, remaining schedule, positional scarcity and scoring format.

    Args:
        player: Player to value
        settings: League snapshot

    Returns:
        Non-negative integer value
    """
    base_value = 0.0

    recent = player.stats[:RECENT_GAMES]
    if recent:
        avg_points = sum(s.fantasy_points for s in recent) / len(recent)
        base_value = avg_points * RECENT_POINTS_SCALE

    # Weighs past production against the total remaining projection,
    # not a per-game projection
    if player.projections:
        projected_total = sum(p.projected_points for p in player.projections)
        base_value = (base_value + projected_total) / 2

    base_value *= injury_multiplier(player.injury_status)
    base_value *= remaining_season_fraction(settings.current_week)
    base_value *= position_scarcity(player.position)

    if settings.is_ppr and player.position in PPR_POSITIONS:
        base_value *= PPR_BONUS

    return max(0, round_value(base_value))


def valuate_pick(pick: DraftPick, settings: LeagueSettings) -> int:
    """
    Calculate a draft pick's trade value.

    Future seasons are discounted 15% per year; picks gain a premium once
    the season passes its midpoint.
    """
    value = float(DRAFT_PICK_VALUES.get(pick.round, MIN_PICK_VALUE))

    years_ahead = pick.year - settings.season
    if years_ahead > 0:
        value *= FUTURE_PICK_DISCOUNT**years_ahead

    if settings.current_week > MIDSEASON_WEEK:
        value *= MIDSEASON_PICK_PREMIUM

    return round_value(value)


def valuate_asset(asset: RosterAsset, settings: LeagueSettings) -> int:
    """Value a single roster asset (player or draft pick)."""
    if isinstance(asset, DraftPick):
        return valuate_pick(asset, settings)
    return valuate_player(asset, settings)


def valuate_bundle(bundle: TradeBundle, settings: LeagueSettings) -> int:
    """Total value of every player and pick in a trade bundle."""
    total = sum(valuate_player(p, settings) for p in bundle.players)
    total += sum(valuate_pick(pick, settings) for pick in bundle.picks)
    logger.debug(
        "Valued bundle of %d players and %d picks at %d",
        len(bundle.players),
        len(bundle.picks),
        total,
    )
    return total


def roster_strength(roster: list[Player], settings: LeagueSettings) -> int:
    """Sum of player values across a roster. Draft picks are not counted."""
    return sum(valuate_player(p, settings) for p in roster)


def describe_bundle(bundle: TradeBundle, settings: LeagueSettings) -> BundleValuation:
    """Break a bundle down into per-asset values."""
    assets = [
        AssetValue(asset_type="player", name=p.display_name, value=valuate_player(p, settings))
        for p in bundle.players
    ]
    assets += [
        AssetValue(asset_type="pick", name=pick.display_name, value=valuate_pick(pick, settings))
        for pick in bundle.picks
    ]
    return BundleValuation(assets=assets, total_value=sum(a.value for a in assets))
