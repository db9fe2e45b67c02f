"""
Trade Review Service

Lifecycle of a trade proposal: propose, respond, counter, league vote,
commissioner override and execution.

Every transition takes a proposal and returns an updated copy; nothing is
persisted here. Illegal transitions raise TradeReviewError.
"""

import logging
from datetime import datetime, timedelta, timezone

from astral_draft.models.league import LeagueSettings
from astral_draft.models.player import Player
from astral_draft.models.trade_review import (
    OverrideAction,
    RosterUpdate,
    TradeAssets,
    TradeProposal,
    TradeStatus,
    TradeVote,
    VoteType,
)
from astral_draft.services.advisor import as_aware, validate_trade_constraints

logger = logging.getLogger(__name__)


class TradeReviewError(ValueError):
    """A trade action is not allowed in the proposal's current state."""


class TradePermissionError(TradeReviewError):
    """The acting team may not perform this action."""


class TradeExpiredError(TradeReviewError):
    """The proposal expired before it was answered."""

    def __init__(self, trade: TradeProposal):
        super().__init__("This trade has expired")
        self.trade = trade


def _now(now: datetime | None) -> datetime:
    return as_aware(now) if now is not None else datetime.now(timezone.utc)


def _require_status(trade: TradeProposal, action: str, *allowed: TradeStatus) -> None:
    if trade.status not in allowed:
        raise TradeReviewError(f"Cannot {action} trade with status: {trade.status.value}")


def _require_partner(trade: TradeProposal, team_id: str, action: str) -> None:
    if team_id != trade.partner_team_id:
        raise TradePermissionError(f"Only the trade partner can {action} this trade")


def propose_trade(
    league_id: str,
    initiator_team_id: str,
    partner_team_id: str,
    initiator_roster: list[Player],
    partner_roster: list[Player],
    initiator_gives: TradeAssets,
    initiator_receives: TradeAssets,
    settings: LeagueSettings,
    note: str | None = None,
    now: datetime | None = None,
) -> TradeProposal:
    """
    Create a trade proposal after checking league trade rules.

    Raises:
        TradeReviewError: If the teams match or the trade breaks a league rule
    """
    if initiator_team_id == partner_team_id:
        raise TradeReviewError("A team cannot trade with itself")

    now = _now(now)
    result = validate_trade_constraints(
        initiator_roster,
        partner_roster,
        initiator_gives.player_ids,
        initiator_receives.player_ids,
        settings.trade_constraints(),
        now=now,
    )
    if not result.valid:
        raise TradeReviewError("; ".join(result.errors))

    trade = TradeProposal(
        league_id=league_id,
        initiator_team_id=initiator_team_id,
        partner_team_id=partner_team_id,
        initiator_gives=initiator_gives,
        initiator_receives=initiator_receives,
        note=note,
        proposed_at=now,
        expires_at=now + timedelta(days=settings.trade_expiration_days),
    )
    logger.info(
        "Trade %s proposed by %s to %s", trade.id, initiator_team_id, partner_team_id
    )
    return trade


def expire_if_stale(trade: TradeProposal, now: datetime | None = None) -> TradeProposal:
    """Mark an unanswered proposal as expired once its window has closed."""
    if trade.status == TradeStatus.PROPOSED and _now(now) > as_aware(trade.expires_at):
        return trade.model_copy(update={"status": TradeStatus.EXPIRED})
    return trade


def accept_trade(
    trade: TradeProposal,
    team_id: str,
    settings: LeagueSettings,
    now: datetime | None = None,
) -> TradeProposal:
    """
    Partner accepts a proposal.

    In leagues with trade voting the acceptance opens a review window;
    otherwise the trade is ready to execute straight away.

    Raises:
        TradeExpiredError: If the proposal has expired; carries the
            EXPIRED copy of the trade
    """
    _require_partner(trade, team_id, "accept")
    _require_status(trade, "accept", TradeStatus.PROPOSED)

    now = _now(now)
    expired = expire_if_stale(trade, now)
    if expired.status == TradeStatus.EXPIRED:
        logger.info("Trade %s expired before acceptance", trade.id)
        raise TradeExpiredError(expired)

    update = {"status": TradeStatus.ACCEPTED, "responded_at": now}
    if settings.uses_trade_voting:
        update["review_ends_at"] = now + timedelta(days=settings.trade_review_days)
    return trade.model_copy(update=update)


def reject_trade(
    trade: TradeProposal,
    team_id: str,
    now: datetime | None = None,
) -> TradeProposal:
    """Partner rejects a proposal."""
    _require_partner(trade, team_id, "reject")
    _require_status(trade, "reject", TradeStatus.PROPOSED)
    return trade.model_copy(
        update={"status": TradeStatus.REJECTED, "responded_at": _now(now)}
    )


def counter_trade(
    trade: TradeProposal,
    team_id: str,
    counter_gives: TradeAssets,
    counter_receives: TradeAssets,
    settings: LeagueSettings,
    note: str | None = None,
    now: datetime | None = None,
) -> tuple[TradeProposal, TradeProposal]:
    """
    Partner answers a proposal with a counter-offer.

    The counter swaps the roles: the original partner becomes the initiator.

    Returns:
        (original marked COUNTERED, new counter proposal)
    """
    _require_partner(trade, team_id, "counter")
    _require_status(trade, "counter", TradeStatus.PROPOSED)

    now = _now(now)
    counter = TradeProposal(
        league_id=trade.league_id,
        initiator_team_id=trade.partner_team_id,
        partner_team_id=trade.initiator_team_id,
        initiator_gives=counter_gives,
        initiator_receives=counter_receives,
        note=note,
        proposed_at=now,
        expires_at=now + timedelta(days=settings.counter_expiration_days),
        parent_trade_id=trade.id,
    )
    original = trade.model_copy(
        update={
            "status": TradeStatus.COUNTERED,
            "responded_at": now,
            "counter_trade_id": counter.id,
        }
    )
    logger.info("Trade %s countered with %s", trade.id, counter.id)
    return original, counter


def cancel_trade(
    trade: TradeProposal,
    team_id: str,
    now: datetime | None = None,
) -> TradeProposal:
    """Initiator withdraws a proposed or accepted trade."""
    if team_id != trade.initiator_team_id:
        raise TradePermissionError("Only the trade initiator can cancel this trade")
    _require_status(trade, "cancel", TradeStatus.PROPOSED, TradeStatus.ACCEPTED)
    return trade.model_copy(
        update={"status": TradeStatus.CANCELLED, "responded_at": _now(now)}
    )


def vote_trade(
    trade: TradeProposal,
    team_id: str,
    vote_type: VoteType,
    settings: LeagueSettings,
    reason: str | None = None,
    now: datetime | None = None,
) -> TradeProposal:
    """
    Record a league member's vote on an accepted trade.

    Votes are taken until the review window closes. The trade is vetoed
    once veto votes reach the league threshold.
    """
    if trade.status != TradeStatus.ACCEPTED:
        raise TradeReviewError("This trade is not open for voting")
    if not settings.uses_trade_voting:
        raise TradeReviewError("This league does not use trade voting")
    if trade.involves(team_id):
        raise TradePermissionError("You cannot vote on your own trade")
    if any(v.team_id == team_id for v in trade.votes):
        raise TradeReviewError("You have already voted on this trade")

    now = _now(now)
    if trade.review_ends_at is not None and now > as_aware(trade.review_ends_at):
        raise TradeReviewError("The review period for this trade has ended")

    vote = TradeVote(team_id=team_id, vote_type=vote_type, reason=reason, cast_at=now)
    update: dict = {"votes": [*trade.votes, vote]}

    if vote_type == VoteType.VETO:
        veto_votes = trade.veto_votes + 1
        update["veto_votes"] = veto_votes
        if veto_votes >= settings.trade_votes_needed:
            update["status"] = TradeStatus.VETOED
            update["responded_at"] = now
            logger.info("Trade %s vetoed by league vote", trade.id)

    return trade.model_copy(update=update)


def execute_trade(
    trade: TradeProposal,
    initiator_roster: list[str],
    partner_roster: list[str],
    settings: LeagueSettings,
    now: datetime | None = None,
) -> RosterUpdate:
    """
    Move players between rosters and mark the trade executed.

    In leagues with trade voting an accepted trade only executes once its
    review window has closed without enough vetoes. Use
    commissioner_override to push it through earlier.

    Args:
        trade: An accepted trade
        initiator_roster: Initiator's player IDs
        partner_roster: Partner's player IDs
        settings: League snapshot

    Returns:
        RosterUpdate with the executed trade and both new rosters
    """
    _require_status(trade, "execute", TradeStatus.ACCEPTED)

    now = _now(now)
    if settings.uses_trade_voting:
        review_ends_at = trade.review_ends_at
        if review_ends_at is None or now < as_aware(review_ends_at):
            raise TradeReviewError("This trade is still under league review")

    return _apply(trade, initiator_roster, partner_roster, now)


def _apply(
    trade: TradeProposal,
    initiator_roster: list[str],
    partner_roster: list[str],
    now: datetime,
) -> RosterUpdate:
    gives = trade.initiator_gives.player_ids
    receives = trade.initiator_receives.player_ids

    new_initiator = [pid for pid in initiator_roster if pid not in gives] + receives
    new_partner = [pid for pid in partner_roster if pid not in receives] + gives

    executed = trade.model_copy(
        update={"status": TradeStatus.EXECUTED, "executed_at": now}
    )
    logger.info("Trade %s executed", trade.id)
    return RosterUpdate(
        trade=executed,
        initiator_roster=new_initiator,
        partner_roster=new_partner,
    )


def commissioner_override(
    trade: TradeProposal,
    team_id: str,
    action: OverrideAction,
    reason: str,
    settings: LeagueSettings,
    initiator_roster: list[str],
    partner_roster: list[str],
    now: datetime | None = None,
) -> RosterUpdate:
    """
    Commissioner forces a trade through or vetoes it.

    Approving executes the trade immediately. Vetoing leaves both rosters
    unchanged. The reason is kept on the trade.

    Raises:
        TradePermissionError: If the acting team is not the league commissioner
    """
    if settings.commissioner_team_id is None or team_id != settings.commissioner_team_id:
        raise TradePermissionError("Only the commissioner can override trades")
    if trade.status in (
        TradeStatus.EXECUTED,
        TradeStatus.VETOED,
        TradeStatus.CANCELLED,
    ):
        raise TradeReviewError(
            f"Cannot override trade with status: {trade.status.value}"
        )

    now = _now(now)
    flagged = trade.model_copy(
        update={
            "commissioner_override": True,
            "override_reason": reason,
            "responded_at": now,
        }
    )

    if action == OverrideAction.APPROVE:
        return _apply(flagged, initiator_roster, partner_roster, now)

    vetoed = flagged.model_copy(update={"status": TradeStatus.VETOED})
    logger.info("Trade %s vetoed by commissioner: %s", trade.id, reason)
    return RosterUpdate(
        trade=vetoed,
        initiator_roster=list(initiator_roster),
        partner_roster=list(partner_roster),
    )
