"""
API Dependencies

Shared dependencies for FastAPI route handlers, including the league
snapshot every trade endpoint evaluates against.
"""

from typing import Annotated

from fastapi import Body, Depends

from astral_draft.config import Settings, get_settings
from astral_draft.models.league import LeagueSettings
from astral_draft.models.player import Player


def get_league_settings(
    settings: Annotated[Settings, Depends(get_settings)],
    league: Annotated[
        LeagueSettings | None,
        Body(description="League snapshot; configured defaults when omitted"),
    ] = None,
) -> LeagueSettings:
    """Dependency resolving the league snapshot for a request."""
    if league is None:
        return settings.default_league_settings()
    return league


# Type aliases for cleaner route signatures
LeagueSettingsDep = Annotated[LeagueSettings, Depends(get_league_settings)]


# Common body parameters
InitiatorRosterBody = Annotated[
    list[Player],
    Body(description="Initiator's roster before the trade"),
]

PartnerRosterBody = Annotated[
    list[Player],
    Body(description="Partner's roster before the trade"),
]
