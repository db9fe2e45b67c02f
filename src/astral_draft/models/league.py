"""
League-related Pydantic models.
"""

from datetime import date
from enum import Enum

from pydantic import AwareDatetime, BaseModel, Field

from astral_draft.models.player import Position


class ScoringType(str, Enum):
    """League scoring format."""

    STANDARD = "STANDARD"
    PPR = "PPR"
    HALF_PPR = "HALF_PPR"


def _default_roster_positions() -> dict[Position, int]:
    return {
        Position.QB: 1,
        Position.RB: 2,
        Position.WR: 2,
        Position.TE: 1,
        Position.FLEX: 1,
        Position.K: 1,
        Position.DEF: 1,
    }


class TradeConstraints(BaseModel):
    """League rules a trade must satisfy before it can be committed."""

    max_roster_size: int = Field(ge=1)
    roster_positions: dict[Position, int] = Field(default_factory=_default_roster_positions)
    trade_deadline: AwareDatetime | None = None


class LeagueSettings(BaseModel):
    """Snapshot of the league configuration a trade is evaluated against."""

    scoring_type: ScoringType = ScoringType.STANDARD
    current_week: int = Field(default=1, ge=1, description="Current NFL week")
    season: int = Field(
        default_factory=lambda: date.today().year,
        description="Current season year, used to discount future picks",
    )
    roster_positions: dict[Position, int] = Field(
        default_factory=_default_roster_positions,
        description="Position -> required starters",
    )
    max_roster_size: int = Field(default=16, ge=1)
    trade_deadline: AwareDatetime | None = Field(
        default=None, description="Last moment a trade may be proposed, with timezone"
    )
    commissioner_team_id: str | None = Field(
        default=None, description="Team allowed to override trade outcomes"
    )

    # Trade review
    trade_votes_needed: int = Field(
        default=0, ge=0, description="Veto votes required to block a trade, 0 disables voting"
    )
    trade_expiration_days: int = Field(default=2, ge=1)
    counter_expiration_days: int = Field(default=3, ge=1)
    trade_review_days: int = Field(
        default=2, ge=0, description="League review window after acceptance when voting is on"
    )

    @property
    def is_ppr(self) -> bool:
        return self.scoring_type == ScoringType.PPR

    @property
    def uses_trade_voting(self) -> bool:
        return self.trade_votes_needed > 0

    def trade_constraints(self) -> TradeConstraints:
        """Get the structural trade constraints for this league."""
        return TradeConstraints(
            max_roster_size=self.max_roster_size,
            roster_positions=dict(self.roster_positions),
            trade_deadline=self.trade_deadline,
        )
