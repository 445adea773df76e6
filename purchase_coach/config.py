"""Configuration management using Pydantic Settings"""

from decimal import Decimal
from pydantic_settings import BaseSettings, SettingsConfigDict
from purchase_coach.domain.tuning import ScoringTuning


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="PURCHASE_COACH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Service
    service_name: str = "purchase-coach"
    log_level: str = "INFO"

    # Decision engine
    goal_horizon_weeks: int = 20
    wait_period_days: int = 3
    unbudgeted_remaining: Decimal = Decimal("1000000")

    def scoring_tuning(self) -> ScoringTuning:
        """Engine tuning with the configurable values applied"""
        return ScoringTuning(
            goal_horizon_weeks=self.goal_horizon_weeks,
            wait_period_days=self.wait_period_days,
            unbudgeted_remaining=self.unbudgeted_remaining,
        )


settings = Settings()
