"""Configuration management for housefair."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FairnessThresholds(BaseModel):
    """Tunable thresholds used by the scoring, trend and messaging functions."""

    model_config = ConfigDict(frozen=True)

    warning: float = Field(default=55.0, description="Max member share at which the alert becomes 'warning'")
    critical: float = Field(default=60.0, description="Max member share above which the alert becomes 'critical'")
    trend: float = Field(default=5.0, description="Score difference needed to call a trend improving/worsening")
    excellent: int = Field(default=85, description="Minimum score for the 'excellent' status band")
    good: int = Field(default=70, description="Minimum score for the 'good' status band")
    fair: int = Field(default=55, description="Minimum score for the 'fair' status band")
    poor: int = Field(default=40, description="Minimum score for the 'poor' status band")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Pydantic Logfire Configuration (optional)
    logfire_token: str | None = Field(default=None, description="Pydantic Logfire token for observability")
    environment: str = Field(default="production", description="Deployment environment reported to Logfire")

    # Fairness Engine Configuration
    fairness_warning_threshold: float = Field(
        default=55.0, description="Highest adjusted member share (%) that still counts as no alert"
    )
    fairness_critical_threshold: float = Field(
        default=60.0, description="Adjusted member share (%) above which the household alert is critical"
    )
    fairness_trend_threshold: float = Field(
        default=5.0, description="Points between earliest and latest third of periods to classify a trend"
    )

    def fairness_thresholds(self) -> FairnessThresholds:
        """Build the threshold bundle passed to the engine functions."""
        if self.fairness_critical_threshold < self.fairness_warning_threshold:
            raise ValueError(
                "FAIRNESS_CRITICAL_THRESHOLD must be greater than or equal to FAIRNESS_WARNING_THRESHOLD"
            )
        return FairnessThresholds(
            warning=self.fairness_warning_threshold,
            critical=self.fairness_critical_threshold,
            trend=self.fairness_trend_threshold,
        )


# Application Constants
class Constants:
    """Application-wide constants."""

    # Member messages
    MOST_ACTIVE_RATIO: float = 1.3  # Top share must exceed the runner-up by 30%

    # Weekly report
    WEEKLY_HIGHLIGHT_LIMIT: int = 4
    WEEKLY_SUGGESTION_LIMIT: int = 3
    TOP_CONTRIBUTOR_MIN_TASKS: int = 5
    LARGE_GAP_POINTS: float = 40.0
    WEAK_CATEGORY_SCORE: int = 40
    OVERLOADED_SHARE: float = 50.0

    # Monthly report
    MONTHLY_ACHIEVEMENT_LIMIT: int = 4
    MONTHLY_IMPROVEMENT_LIMIT: int = 3
    MONTHLY_EXCELLENT_AVERAGE: int = 80
    MONTHLY_LOW_AVERAGE: int = 60
    MONTHLY_OVERLOADED_SHARE: float = 45.0
    BALANCED_SHARE_TOLERANCE: float = 10.0  # Max distance from an even split, in points

    # Contribution labels (average adjusted share, %)
    CONTRIBUTION_MAJOR: float = 35.0
    CONTRIBUTION_BALANCED: float = 25.0
    CONTRIBUTION_MODERATE: float = 15.0


def get_settings() -> Settings:
    """Get application settings (singleton pattern)."""
    return Settings()


# Global settings instance
settings = get_settings()
