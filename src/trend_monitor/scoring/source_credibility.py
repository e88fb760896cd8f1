# src/trend_monitor/scoring/source_credibility.py
"""Per-source reliability, weight and saturation constants."""
from dataclasses import dataclass
from typing import Optional

from trend_monitor.config.settings import SourcesSettings
from trend_monitor.models.article import SourceName


@dataclass(frozen=True)
class SourceProfile:
    """Credibility profile of one source type.

    Attributes:
        source: The source the profile describes.
        reliability: How trustworthy the source's signal is (0-1).
        weight: Share of the source in authority and confidence (0-1).
        saturation: Item count at which the source counts as fully active.
    """

    source: SourceName
    reliability: float
    weight: float
    saturation: float

    def saturation_percent(self, item_count: int) -> float:
        """Item count as a percent of saturation, capped at 100."""
        return min(100.0, item_count / self.saturation * 100)


DEFAULT_PROFILES = {
    SourceName.GOOGLE_TRENDS: SourceProfile(SourceName.GOOGLE_TRENDS, 0.85, 0.14, 4),
    SourceName.GOOGLE_NEWS: SourceProfile(SourceName.GOOGLE_NEWS, 0.80, 0.14, 30),
    SourceName.NEWSDATA: SourceProfile(SourceName.NEWSDATA, 0.80, 0.14, 50),
    SourceName.SERPAPI: SourceProfile(SourceName.SERPAPI, 0.90, 0.14, 30),
    SourceName.GDELT: SourceProfile(SourceName.GDELT, 0.75, 0.14, 50),
    SourceName.REDDIT: SourceProfile(SourceName.REDDIT, 0.70, 0.10, 25),
    SourceName.HACKERNEWS: SourceProfile(SourceName.HACKERNEWS, 0.75, 0.10, 25),
    SourceName.BLUESKY: SourceProfile(SourceName.BLUESKY, 0.65, 0.10, 25),
}


class SourceCredibilityManager:
    """Maps sources to their credibility profiles.

    The number of profiles is the number of source types the system
    supports; confidence uses it as max_sources, so it must match the
    registered aggregators.
    """

    def __init__(self, profiles: Optional[dict[SourceName, SourceProfile]] = None):
        """Initialize the credibility manager.

        Args:
            profiles: Profile per source. If None, uses DEFAULT_PROFILES.
        """
        self._profiles = dict(profiles) if profiles is not None else dict(DEFAULT_PROFILES)

    @classmethod
    def from_settings(cls, settings: SourcesSettings) -> "SourceCredibilityManager":
        """Build the manager from the sources section of the settings."""
        profiles = {}
        for name, profile in settings.profiles.items():
            source = SourceName(name)
            profiles[source] = SourceProfile(
                source=source,
                reliability=profile.reliability,
                weight=profile.weight,
                saturation=profile.saturation,
            )
        return cls(profiles)

    @property
    def max_sources(self) -> int:
        return len(self._profiles)

    @property
    def sources(self) -> list[SourceName]:
        return list(self._profiles)

    def get_profile(self, source: SourceName) -> Optional[SourceProfile]:
        """Get the profile of a source, None if the source is unknown."""
        return self._profiles.get(source)
