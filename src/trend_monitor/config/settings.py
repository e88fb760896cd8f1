# src/trend_monitor/config/settings.py
from pathlib import Path

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SystemConfig(BaseModel):
    name: str = "Trend Monitor"
    version: str = "2.0.0"


class FactorWeights(BaseModel):
    """Weights of the six trend score factors (sum to 1.0)."""

    velocity: float = Field(default=0.20, ge=0, le=1)
    relevance: float = Field(default=0.20, ge=0, le=1)
    authority: float = Field(default=0.15, ge=0, le=1)
    recency: float = Field(default=0.15, ge=0, le=1)
    momentum: float = Field(default=0.20, ge=0, le=1)
    sentiment: float = Field(default=0.10, ge=0, le=1)


class ScoringSettings(BaseModel):
    """Settings for the trend scoring engine."""

    # Recency decay
    recency_half_life_days: float = Field(default=3.0, gt=0, le=30)
    unknown_date_weight: float = Field(default=0.5, gt=0, le=1)

    # Smoothing
    ema_alpha: float = Field(default=0.3, gt=0, le=1)
    neutral_baseline: float = Field(default=50.0, ge=0, le=100)

    # Relevance
    relevance_points_per_match: float = Field(default=25.0, gt=0, le=100)

    # Regional partitions checked by the trend source
    regions: list[str] = Field(default_factory=lambda: ["US", "GB", "CA", "AU"])

    factor_weights: FactorWeights = Field(default_factory=FactorWeights)


class SourceProfileSettings(BaseModel):
    """Reliability, weight and saturation constant for one source."""

    reliability: float = Field(ge=0, le=1)
    weight: float = Field(ge=0, le=1)
    saturation: float = Field(gt=0)


def _default_source_profiles() -> dict[str, SourceProfileSettings]:
    return {
        "google_trends": SourceProfileSettings(reliability=0.85, weight=0.14, saturation=4),
        "google_news": SourceProfileSettings(reliability=0.80, weight=0.14, saturation=30),
        "newsdata": SourceProfileSettings(reliability=0.80, weight=0.14, saturation=50),
        "serpapi": SourceProfileSettings(reliability=0.90, weight=0.14, saturation=30),
        "gdelt": SourceProfileSettings(reliability=0.75, weight=0.14, saturation=50),
        "reddit": SourceProfileSettings(reliability=0.70, weight=0.10, saturation=25),
        "hackernews": SourceProfileSettings(reliability=0.75, weight=0.10, saturation=25),
        "bluesky": SourceProfileSettings(reliability=0.65, weight=0.10, saturation=25),
    }


class SourcesSettings(BaseModel):
    """Per-source credibility profiles and engagement constants."""

    profiles: dict[str, SourceProfileSettings] = Field(
        default_factory=_default_source_profiles
    )
    reddit_engagement_constant: float = Field(default=100.0, gt=0)
    hackernews_engagement_constant: float = Field(default=50.0, gt=0)
    bluesky_engagement_constant: float = Field(default=50.0, gt=0)


class DeduplicationSettings(BaseModel):
    """Settings for the article deduplicator."""

    title_similarity_threshold: float = Field(default=0.6, ge=0.0, le=1.0)
    min_token_length: int = Field(default=3, ge=1, le=10)
    tracking_params: list[str] = Field(
        default_factory=lambda: ["utm_*", "ref", "source", "fbclid", "gclid", "msclkid"]
    )


class RunnerSettings(BaseModel):
    """Settings for the monitor runner."""

    dry_run: bool = False
    backfill: bool = False
    max_articles_in_alert: int = Field(default=10, ge=1, le=50)
    # Backfill runs always write reports
    write_reports: bool = False


class StorageConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TREND_MONITOR_")

    data_dir: Path = Path("data")
    monitors_file: str = "monitors.json"
    alerts_file: str = "alerts.jsonl"
    fetched_dir: str = "fetched"
    reports_dir: str = "reports"

    @property
    def monitors_path(self) -> Path:
        return self.data_dir / self.monitors_file

    @property
    def alerts_path(self) -> Path:
        return self.data_dir / self.alerts_file

    @property
    def fetched_path(self) -> Path:
        return self.data_dir / self.fetched_dir

    @property
    def reports_path(self) -> Path:
        return self.data_dir / self.reports_dir


class Settings(BaseModel):
    system: SystemConfig = Field(default_factory=SystemConfig)
    scoring: ScoringSettings = Field(default_factory=ScoringSettings)
    sources: SourcesSettings = Field(default_factory=SourcesSettings)
    deduplication: DeduplicationSettings = Field(default_factory=DeduplicationSettings)
    runner: RunnerSettings = Field(default_factory=RunnerSettings)
    storage: StorageConfig = Field(default_factory=StorageConfig)

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from YAML file with env var overrides."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        data.pop("storage", None)
        storage = StorageConfig()

        return cls(
            **data,
            storage=storage,
        )
