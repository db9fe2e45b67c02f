"""API package - FastAPI routes and dependencies."""

from astral_draft.api.dependencies import (
    LeagueSettingsDep,
    get_league_settings,
)

__all__ = [
    "get_league_settings",
    "LeagueSettingsDep",
]
