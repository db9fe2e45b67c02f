"""
Trade Analysis API Routes

Endpoints for analyzing, validating and suggesting trades.
"""

from typing import Annotated

from fastapi import APIRouter, Body
from pydantic import AwareDatetime

from astral_draft.api.dependencies import (
    InitiatorRosterBody,
    LeagueSettingsDep,
    PartnerRosterBody,
)
from astral_draft.models.player import Player, Position, TradeBundle
from astral_draft.models.trade import (
    TradeAnalysis,
    TradeSuggestion,
    TradeValidationResult,
)
from astral_draft.services.advisor import validate_trade_constraints
from astral_draft.services.suggestions import analyze_team_needs, generate_trade_suggestions
from astral_draft.services.trade_analyzer import analyze_trade

router = APIRouter()


@router.post(
    "/analyze",
    response_model=TradeAnalysis,
    summary="Analyze a trade",
    description="Value both sides of a trade and report fairness, grades, impact and advice.",
)
async def analyze(
    league: LeagueSettingsDep,
    initiator_gives: Annotated[TradeBundle, Body(description="Assets the initiator gives")],
    initiator_receives: Annotated[TradeBundle, Body(description="Assets the initiator receives")],
    initiator_roster: InitiatorRosterBody,
    partner_roster: PartnerRosterBody,
) -> TradeAnalysis:
    """Analyze trade fairness and impact."""
    return analyze_trade(
        initiator_gives,
        initiator_receives,
        initiator_roster,
        partner_roster,
        league,
    )


@router.post(
    "/validate",
    response_model=TradeValidationResult,
    summary="Validate a trade",
    description="Check deadline, roster size and ownership rules for a trade.",
)
async def validate(
    league: LeagueSettingsDep,
    initiator_roster: InitiatorRosterBody,
    partner_roster: PartnerRosterBody,
    given_ids: Annotated[list[str], Body(description="Player IDs the initiator gives")],
    received_ids: Annotated[list[str], Body(description="Player IDs the initiator receives")],
    now: Annotated[
        AwareDatetime | None,
        Body(description="Evaluation time with timezone, defaults to the server clock"),
    ] = None,
) -> TradeValidationResult:
    """Validate trade constraints."""
    return validate_trade_constraints(
        initiator_roster,
        partner_roster,
        given_ids,
        received_ids,
        league.trade_constraints(),
        now=now,
    )


@router.post(
    "/suggestions",
    response_model=list[TradeSuggestion],
    summary="Suggest trades",
    description="Suggest up to 5 one-for-one swaps that address both teams' needs.",
)
async def suggestions(
    league: LeagueSettingsDep,
    my_roster: Annotated[list[Player], Body(description="Roster looking for trades")],
    target_roster: Annotated[list[Player], Body(description="Roster of the trade target")],
) -> list[TradeSuggestion]:
    """Generate trade suggestions."""
    return generate_trade_suggestions(my_roster, target_roster, league)


@router.post(
    "/team-needs",
    response_model=list[Position],
    summary="Get team needs",
    description="List positions where a roster is below the minimum depth.",
)
async def team_needs(
    roster: Annotated[list[Player], Body(embed=True)],
) -> list[Position]:
    """Analyze roster needs."""
    return analyze_team_needs(roster)
