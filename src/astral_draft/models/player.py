"""
Player and roster asset Pydantic models.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Position(str, Enum):
    """Roster positions."""

    QB = "QB"
    RB = "RB"
    WR = "WR"
    TE = "TE"
    K = "K"
    DEF = "DEF"
    FLEX = "FLEX"


class InjuryStatus(str, Enum):
    """Player availability status."""

    ACTIVE = "ACTIVE"
    QUESTIONABLE = "QUESTIONABLE"
    DOUBTFUL = "DOUBTFUL"
    OUT = "OUT"
    IR = "IR"
    SUSPENDED = "SUSPENDED"


class Trend(str, Enum):
    """Direction of a player's recent scoring."""

    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class PlayerStat(BaseModel):
    """Fantasy points for one completed game."""

    model_config = ConfigDict(frozen=True)

    week: int | None = None
    fantasy_points: float = 0.0


class PlayerProjection(BaseModel):
    """Forward-looking point projection for one game."""

    model_config = ConfigDict(frozen=True)

    week: int | None = None
    projected_points: float = 0.0


class RecentPerformance(BaseModel):
    """Summary of a player's recent form."""

    model_config = ConfigDict(frozen=True)

    average_points: float
    trend: Trend = Trend.STABLE
    consistency: float = 0.0


class Player(BaseModel):
    """
    A rostered NFL player enriched with stats and projections.

    Stats are ordered most-recent-first.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str | None = None
    position: Position
    nfl_team: str | None = None
    injury_status: InjuryStatus | None = Field(
        default=None, description="None means the player is not on the injury report"
    )
    stats: list[PlayerStat] = Field(default_factory=list)
    projections: list[PlayerProjection] = Field(default_factory=list)
    projected_points: float | None = Field(
        default=None, description="Season-level projection used for rankings"
    )
    recent_performance: RecentPerformance | None = None

    @property
    def display_name(self) -> str:
        """Get display name for the player."""
        return self.name or self.id

    @property
    def is_injured(self) -> bool:
        return self.injury_status is not None and self.injury_status != InjuryStatus.ACTIVE


class DraftPick(BaseModel):
    """A future draft pick used as a trade asset."""

    model_config = ConfigDict(frozen=True)

    round: int = Field(ge=1, description="1-based draft round")
    year: int = Field(description="Draft season year")
    original_owner: str | None = None

    @property
    def display_name(self) -> str:
        return f"{self.year} Round {self.round} Pick"


RosterAsset = Player | DraftPick


class TradeBundle(BaseModel):
    """The set of assets one side gives or receives."""

    players: list[Player] = Field(default_factory=list)
    picks: list[DraftPick] = Field(default_factory=list)

    @property
    def player_ids(self) -> list[str]:
        return [p.id for p in self.players]
