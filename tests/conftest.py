"""Shared fixtures and player factories."""

import pytest

from astral_draft.models.league import LeagueSettings, ScoringType
from astral_draft.models.player import (
    InjuryStatus,
    Player,
    PlayerProjection,
    PlayerStat,
    Position,
    RecentPerformance,
)

SEASON = 2025


def make_player(
    player_id: str,
    position: Position | str = Position.WR,
    avg_points: float | None = None,
    games: int = 5,
    projections: list[float] | None = None,
    injury_status: InjuryStatus | None = None,
    projected_points: float | None = None,
    recent_performance: RecentPerformance | None = None,
) -> Player:
    """Build a player whose recent games all scored avg_points."""
    stats = []
    if avg_points is not None:
        stats = [PlayerStat(week=w, fantasy_points=avg_points) for w in range(games, 0, -1)]
    return Player(
        id=player_id,
        name=f"Player {player_id}",
        position=Position(position),
        injury_status=injury_status,
        stats=stats,
        projections=[PlayerProjection(projected_points=p) for p in projections or []],
        projected_points=projected_points,
        recent_performance=recent_performance,
    )


@pytest.fixture
def league() -> LeagueSettings:
    return LeagueSettings(
        scoring_type=ScoringType.STANDARD,
        current_week=1,
        season=SEASON,
        max_roster_size=16,
    )


@pytest.fixture
def ppr_league(league) -> LeagueSettings:
    return league.model_copy(update={"scoring_type": ScoringType.PPR})


@pytest.fixture
def initiator_roster() -> list[Player]:
    return [
        make_player("i-qb1", Position.QB, 20, projected_points=300),
        make_player("i-qb2", Position.QB, 12, projected_points=200),
        make_player("i-rb1", Position.RB, 15, projected_points=220),
        make_player("i-rb2", Position.RB, 12, projected_points=180),
        make_player("i-rb3", Position.RB, 8, projected_points=120),
        make_player("i-rb4", Position.RB, 6, projected_points=90),
        make_player("i-wr1", Position.WR, 16, projected_points=240),
        make_player("i-wr2", Position.WR, 13, projected_points=200),
        make_player("i-wr3", Position.WR, 10, projected_points=150),
        make_player("i-wr4", Position.WR, 7, projected_points=110),
        make_player("i-te1", Position.TE, 10, projected_points=150),
        make_player("i-k1", Position.K, 8, projected_points=130),
        make_player("i-def1", Position.DEF, 7, projected_points=110),
    ]


@pytest.fixture
def partner_roster() -> list[Player]:
    return [
        make_player("p-qb1", Position.QB, 22, projected_points=320),
        make_player("p-qb2", Position.QB, 10, projected_points=160),
        make_player("p-rb1", Position.RB, 17, projected_points=250),
        make_player("p-rb2", Position.RB, 11, projected_points=170),
        make_player("p-rb3", Position.RB, 9, projected_points=130),
        make_player("p-rb4", Position.RB, 5, projected_points=80),
        make_player("p-wr1", Position.WR, 15, projected_points=230),
        make_player("p-wr2", Position.WR, 14, projected_points=210),
        make_player("p-wr3", Position.WR, 9, projected_points=140),
        make_player("p-wr4", Position.WR, 6, projected_points=100),
        make_player("p-te1", Position.TE, 11, projected_points=160),
        make_player("p-k1", Position.K, 9, projected_points=135),
        make_player("p-def1", Position.DEF, 8, projected_points=120),
    ]
