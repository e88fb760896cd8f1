"""Source aggregators that project fetched provider payloads."""

from trend_monitor.collectors.aggregator_manager import AggregatorManager
from trend_monitor.collectors.base import BaseAggregator, TermAggregator
from trend_monitor.collectors.bluesky_aggregator import BlueskyAggregator
from trend_monitor.collectors.gdelt_aggregator import GdeltAggregator
from trend_monitor.collectors.google_news_aggregator import GoogleNewsAggregator
from trend_monitor.collectors.google_trends_aggregator import GoogleTrendsAggregator
from trend_monitor.collectors.hackernews_aggregator import HackerNewsAggregator
from trend_monitor.collectors.newsdata_aggregator import NewsDataAggregator
from trend_monitor.collectors.reddit_aggregator import RedditAggregator
from trend_monitor.collectors.serpapi_aggregator import SerpApiAggregator

__all__ = [
    "AggregatorManager",
    "BaseAggregator",
    "TermAggregator",
    "BlueskyAggregator",
    "GdeltAggregator",
    "GoogleNewsAggregator",
    "GoogleTrendsAggregator",
    "HackerNewsAggregator",
    "NewsDataAggregator",
    "RedditAggregator",
    "SerpApiAggregator",
]
