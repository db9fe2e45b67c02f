"""
Configuration module using pydantic-settings.

Loads settings from environment variables with sensible defaults.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from astral_draft.models.league import LeagueSettings, ScoringType


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ASTRAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API Configuration
    api_title: str = "Astral Draft Trade API"
    api_version: str = "0.1.0"
    api_description: str = "Trade valuation and fairness analysis for fantasy football leagues"
    debug: bool = False

    # Logging
    log_level: str = "INFO"

    # League defaults (used when a request omits league settings)
    default_scoring_type: ScoringType = ScoringType.STANDARD
    default_max_roster_size: int = 16
    default_trade_votes_needed: int = 0
    default_trade_review_days: int = 2
    default_commissioner_team_id: str | None = None

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = True

    def default_league_settings(self) -> LeagueSettings:
        """League snapshot built from the configured defaults."""
        return LeagueSettings(
            scoring_type=self.default_scoring_type,
            max_roster_size=self.default_max_roster_size,
            trade_votes_needed=self.default_trade_votes_needed,
            trade_review_days=self.default_trade_review_days,
            commissioner_team_id=self.default_commissioner_team_id,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
