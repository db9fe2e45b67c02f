"""
Valuation API Routes

Endpoints for valuing individual players, draft picks and bundles.
"""

from typing import Annotated

from fastapi import APIRouter, Body

from astral_draft.api.dependencies import LeagueSettingsDep
from astral_draft.models.player import DraftPick, Player, TradeBundle
from astral_draft.models.trade import AssetValue, BundleValuation
from astral_draft.services.valuation import describe_bundle, valuate_pick, valuate_player

router = APIRouter()


@router.post(
    "/player",
    response_model=AssetValue,
    summary="Value a player",
    description="Calculate a player's trade value for the given league snapshot.",
)
async def value_player(
    league: LeagueSettingsDep,
    player: Annotated[Player, Body(embed=True)],
) -> AssetValue:
    """Value a single player."""
    return AssetValue(
        asset_type="player",
        name=player.display_name,
        value=valuate_player(player, league),
    )


@router.post(
    "/pick",
    response_model=AssetValue,
    summary="Value a draft pick",
    description="Calculate a draft pick's trade value for the given league snapshot.",
)
async def value_pick(
    league: LeagueSettingsDep,
    pick: Annotated[DraftPick, Body(embed=True)],
) -> AssetValue:
    """Value a single draft pick."""
    return AssetValue(
        asset_type="pick",
        name=pick.display_name,
        value=valuate_pick(pick, league),
    )


@router.post(
    "/bundle",
    response_model=BundleValuation,
    summary="Value a trade bundle",
    description="Value every player and pick in a bundle and return the total.",
)
async def value_bundle(
    league: LeagueSettingsDep,
    bundle: Annotated[TradeBundle, Body(embed=True)],
) -> BundleValuation:
    """Value a bundle of players and picks."""
    return describe_bundle(bundle, league)
