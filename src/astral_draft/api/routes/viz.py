"""
Visualization API Routes

Endpoints for generating interactive Plotly charts of a trade.
All endpoints return HTML content for embedding or viewing directly.
"""

from typing import Annotated

from fastapi import APIRouter, Body
from fastapi.responses import HTMLResponse

from astral_draft.api.dependencies import (
    InitiatorRosterBody,
    LeagueSettingsDep,
    PartnerRosterBody,
)
from astral_draft.models.player import TradeBundle
from astral_draft.services.trade_analyzer import analyze_trade
from astral_draft.visualization import charts

router = APIRouter()


@router.post(
    "/trade",
    response_class=HTMLResponse,
    summary="Trade breakdown chart",
    description="Stacked asset values for both sides next to a fairness gauge.",
)
async def get_trade_chart(
    league: LeagueSettingsDep,
    initiator_gives: Annotated[TradeBundle, Body()],
    initiator_receives: Annotated[TradeBundle, Body()],
    initiator_roster: InitiatorRosterBody,
    partner_roster: PartnerRosterBody,
) -> HTMLResponse:
    """Generate a trade breakdown chart."""
    analysis = analyze_trade(
        initiator_gives, initiator_receives, initiator_roster, partner_roster, league
    )
    html = charts.trade_value_chart(initiator_gives, initiator_receives, analysis, league)
    return HTMLResponse(content=html)


@router.post(
    "/depth",
    response_class=HTMLResponse,
    summary="Positional depth chart",
    description="Each team's depth per position before and after the trade.",
)
async def get_depth_chart(
    league: LeagueSettingsDep,
    initiator_gives: Annotated[TradeBundle, Body()],
    initiator_receives: Annotated[TradeBundle, Body()],
    initiator_roster: InitiatorRosterBody,
    partner_roster: PartnerRosterBody,
) -> HTMLResponse:
    """Generate a positional depth chart."""
    analysis = analyze_trade(
        initiator_gives, initiator_receives, initiator_roster, partner_roster, league
    )
    html = charts.position_depth_chart(analysis, initiator_roster, partner_roster)
    return HTMLResponse(content=html)
