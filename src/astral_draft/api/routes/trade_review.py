"""
Trade Review API Routes

Endpoints that move a trade proposal through its lifecycle. The caller
owns persistence: each endpoint takes the current proposal and returns
the updated one.
"""

from typing import Annotated

from fastapi import APIRouter, Body, HTTPException

from astral_draft.api.dependencies import (
    InitiatorRosterBody,
    LeagueSettingsDep,
    PartnerRosterBody,
)
from astral_draft.models.trade_review import (
    CounterOffer,
    OverrideAction,
    RosterUpdate,
    TradeAssets,
    TradeProposal,
    VoteType,
)
from astral_draft.services import trade_review
from astral_draft.services.trade_review import (
    TradeExpiredError,
    TradePermissionError,
    TradeReviewError,
)

router = APIRouter()

TradeBody = Annotated[TradeProposal, Body(description="Current state of the proposal")]
TeamIdBody = Annotated[str, Body(description="Team performing the action")]
PlayerIdsBody = Annotated[list[str], Body(description="Roster as player IDs")]


def _http_error(exc: TradeReviewError) -> HTTPException:
    if isinstance(exc, TradeExpiredError):
        # Callers persist the EXPIRED copy
        return HTTPException(
            status_code=400,
            detail={"message": str(exc), "trade": exc.trade.model_dump(mode="json")},
        )
    if isinstance(exc, TradePermissionError):
        return HTTPException(status_code=403, detail=str(exc))
    return HTTPException(status_code=400, detail=str(exc))


@router.post(
    "/propose",
    response_model=TradeProposal,
    summary="Propose a trade",
    description="Validate a trade against league rules and open a proposal.",
)
async def propose(
    league: LeagueSettingsDep,
    league_id: Annotated[str, Body()],
    initiator_team_id: Annotated[str, Body()],
    partner_team_id: Annotated[str, Body()],
    initiator_roster: InitiatorRosterBody,
    partner_roster: PartnerRosterBody,
    initiator_gives: Annotated[TradeAssets, Body()],
    initiator_receives: Annotated[TradeAssets, Body()],
    note: Annotated[str | None, Body()] = None,
) -> TradeProposal:
    """Create a trade proposal."""
    try:
        return trade_review.propose_trade(
            league_id,
            initiator_team_id,
            partner_team_id,
            initiator_roster,
            partner_roster,
            initiator_gives,
            initiator_receives,
            league,
            note=note,
        )
    except TradeReviewError as e:
        raise _http_error(e)


@router.post(
    "/accept",
    response_model=TradeProposal,
    summary="Accept a trade",
)
async def accept(
    league: LeagueSettingsDep,
    trade: TradeBody,
    team_id: TeamIdBody,
) -> TradeProposal:
    """Partner accepts a proposal."""
    try:
        return trade_review.accept_trade(trade, team_id, league)
    except TradeReviewError as e:
        raise _http_error(e)


@router.post(
    "/reject",
    response_model=TradeProposal,
    summary="Reject a trade",
)
async def reject(trade: TradeBody, team_id: TeamIdBody) -> TradeProposal:
    """Partner rejects a proposal."""
    try:
        return trade_review.reject_trade(trade, team_id)
    except TradeReviewError as e:
        raise _http_error(e)


@router.post(
    "/counter",
    response_model=CounterOffer,
    summary="Counter a trade",
    description="Mark the proposal as countered and open a new one with roles swapped.",
)
async def counter(
    league: LeagueSettingsDep,
    trade: TradeBody,
    team_id: TeamIdBody,
    counter_gives: Annotated[TradeAssets, Body()],
    counter_receives: Annotated[TradeAssets, Body()],
    note: Annotated[str | None, Body()] = None,
) -> CounterOffer:
    """Partner makes a counter-offer."""
    try:
        original, counter_trade = trade_review.counter_trade(
            trade, team_id, counter_gives, counter_receives, league, note=note
        )
    except TradeReviewError as e:
        raise _http_error(e)
    return CounterOffer(original=original, counter=counter_trade)


@router.post(
    "/cancel",
    response_model=TradeProposal,
    summary="Cancel a trade",
)
async def cancel(trade: TradeBody, team_id: TeamIdBody) -> TradeProposal:
    """Initiator withdraws a proposal."""
    try:
        return trade_review.cancel_trade(trade, team_id)
    except TradeReviewError as e:
        raise _http_error(e)


@router.post(
    "/vote",
    response_model=TradeProposal,
    summary="Vote on a trade",
    description="Record a league member's approve or veto vote on an accepted trade.",
)
async def vote(
    league: LeagueSettingsDep,
    trade: TradeBody,
    team_id: TeamIdBody,
    vote_type: Annotated[VoteType, Body()],
    reason: Annotated[str | None, Body()] = None,
) -> TradeProposal:
    """Vote on an accepted trade."""
    try:
        return trade_review.vote_trade(trade, team_id, vote_type, league, reason=reason)
    except TradeReviewError as e:
        raise _http_error(e)


@router.post(
    "/execute",
    response_model=RosterUpdate,
    summary="Execute a trade",
    description=(
        "Move players between rosters for an accepted trade. In leagues with "
        "voting the review window must have closed."
    ),
)
async def execute(
    league: LeagueSettingsDep,
    trade: TradeBody,
    initiator_roster: PlayerIdsBody,
    partner_roster: PlayerIdsBody,
) -> RosterUpdate:
    """Execute an accepted trade."""
    try:
        return trade_review.execute_trade(trade, initiator_roster, partner_roster, league)
    except TradeReviewError as e:
        raise _http_error(e)


@router.post(
    "/override",
    response_model=RosterUpdate,
    summary="Commissioner override",
    description="Commissioner forces a trade through or vetoes it regardless of league voting.",
)
async def override(
    league: LeagueSettingsDep,
    trade: TradeBody,
    team_id: TeamIdBody,
    action: Annotated[OverrideAction, Body()],
    reason: Annotated[str, Body(min_length=1, description="Shown to both teams")],
    initiator_roster: PlayerIdsBody,
    partner_roster: PlayerIdsBody,
) -> RosterUpdate:
    """Apply a commissioner override."""
    try:
        return trade_review.commissioner_override(
            trade, team_id, action, reason, league, initiator_roster, partner_roster
        )
    except TradeReviewError as e:
        raise _http_error(e)
