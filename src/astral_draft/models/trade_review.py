"""
Trade proposal lifecycle models.
"""

from enum import Enum
from uuid import uuid4

from pydantic import AwareDatetime, BaseModel, Field

from astral_draft.models.player import DraftPick


class TradeStatus(str, Enum):
    """Trade proposal status."""

    PROPOSED = "PROPOSED"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"
    VETOED = "VETOED"
    EXECUTED = "EXECUTED"
    CANCELLED = "CANCELLED"
    EXPIRED = "EXPIRED"
    COUNTERED = "COUNTERED"


class VoteType(str, Enum):
    """League member vote on an accepted trade."""

    APPROVE = "APPROVE"
    VETO = "VETO"


class OverrideAction(str, Enum):
    """Commissioner override action."""

    APPROVE = "APPROVE"
    VETO = "VETO"


class TradeAssets(BaseModel):
    """Asset references carried on a proposal."""

    player_ids: list[str] = Field(default_factory=list)
    draft_picks: list[DraftPick] = Field(default_factory=list)


class TradeVote(BaseModel):
    """A single league member's vote."""

    team_id: str
    vote_type: VoteType
    reason: str | None = None
    cast_at: AwareDatetime


class TradeProposal(BaseModel):
    """A trade offer between two teams and its review state."""

    id: str = Field(default_factory=lambda: uuid4().hex)
    league_id: str
    initiator_team_id: str
    partner_team_id: str
    initiator_gives: TradeAssets = Field(default_factory=TradeAssets)
    initiator_receives: TradeAssets = Field(default_factory=TradeAssets)
    note: str | None = None
    status: TradeStatus = TradeStatus.PROPOSED
    proposed_at: AwareDatetime
    expires_at: AwareDatetime
    responded_at: AwareDatetime | None = None
    review_ends_at: AwareDatetime | None = Field(
        default=None, description="End of the league review window, set on acceptance"
    )
    executed_at: AwareDatetime | None = None
    parent_trade_id: str | None = None
    counter_trade_id: str | None = None
    veto_votes: int = 0
    votes: list[TradeVote] = Field(default_factory=list)
    commissioner_override: bool = False
    override_reason: str | None = None

    @property
    def is_open(self) -> bool:
        return self.status in (TradeStatus.PROPOSED, TradeStatus.ACCEPTED)

    def involves(self, team_id: str) -> bool:
        return team_id in (self.initiator_team_id, self.partner_team_id)


class RosterUpdate(BaseModel):
    """Both rosters after a trade has been executed, as player ID lists."""

    trade: TradeProposal
    initiator_roster: list[str]
    partner_roster: list[str]


class CounterOffer(BaseModel):
    """A countered proposal and the counter-offer that replaced it."""

    original: TradeProposal
    counter: TradeProposal
