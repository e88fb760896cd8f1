# main.py
"""Main entry point for the trend monitor batch run."""
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from trend_monitor.config.settings import Settings
from trend_monitor.collectors import (
    AggregatorManager,
    BlueskyAggregator,
    GdeltAggregator,
    GoogleNewsAggregator,
    GoogleTrendsAggregator,
    HackerNewsAggregator,
    NewsDataAggregator,
    RedditAggregator,
    SerpApiAggregator,
)
from trend_monitor.notifications import AlertFormatter
from trend_monitor.orchestrator import MonitorRunner, RunSummary
from trend_monitor.scoring import InMemoryScoreHistory, RecencyWeighter, TrendAnalyzer
from trend_monitor.storage import AlertStore, FetchedDataLoader, MonitorStore, ReportStore


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='[%(asctime)s] %(levelname)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/settings.yaml")


def create_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(
        description="Score trend monitors from fetched source data and raise alerts.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Score monitors without writing snapshots, reports or alerts",
    )
    parser.add_argument(
        "--backfill",
        action="store_true",
        help="Score every active monitor regardless of interval and write reports",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help="Path to settings.yaml",
    )
    return parser


def print_startup_banner(settings: Settings) -> None:
    """Print system startup banner."""
    logger.info("=" * 60)
    logger.info(f"Starting {settings.system.name}")
    logger.info(f"Version: {settings.system.version}")
    logger.info(f"Data directory: {settings.storage.data_dir}")
    logger.info("=" * 60)


def load_and_validate_config(config_path: Path = DEFAULT_CONFIG_PATH) -> Settings:
    """Load and validate configuration.

    Args:
        config_path: Path of the YAML settings file.

    Returns:
        Settings object loaded from YAML.

    Raises:
        SystemExit: If the config file is missing or YAML parsing fails.
    """
    # Load environment variables
    load_dotenv()
    logger.info("✓ Loaded environment variables")

    if not config_path.exists():
        logger.error(f"{config_path} not found")
        sys.exit(1)

    try:
        settings = Settings.from_yaml(config_path)
        logger.info(f"✓ Settings loaded from {config_path}")
    except Exception as e:
        logger.error(f"Failed to parse {config_path}: {e}")
        sys.exit(1)

    return settings


def initialize_aggregators(settings: Settings) -> AggregatorManager:
    """Initialize one aggregator per supported source.

    Args:
        settings: Loaded settings object.

    Returns:
        AggregatorManager with all aggregators registered.
    """
    weighter = RecencyWeighter(
        half_life_days=settings.scoring.recency_half_life_days,
        unknown_weight=settings.scoring.unknown_date_weight,
    )
    sources = settings.sources

    aggregators = [
        GoogleTrendsAggregator(regions=settings.scoring.regions, recency_weighter=weighter),
        GoogleNewsAggregator(recency_weighter=weighter),
        NewsDataAggregator(recency_weighter=weighter),
        SerpApiAggregator(recency_weighter=weighter),
        GdeltAggregator(recency_weighter=weighter),
        RedditAggregator(
            engagement_constant=sources.reddit_engagement_constant,
            recency_weighter=weighter,
        ),
        HackerNewsAggregator(
            engagement_constant=sources.hackernews_engagement_constant,
            recency_weighter=weighter,
        ),
        BlueskyAggregator(
            engagement_constant=sources.bluesky_engagement_constant,
            recency_weighter=weighter,
        ),
    ]

    # Confidence divides by the profile count, so both sets must be identical
    registered = {aggregator.name for aggregator in aggregators}
    unmatched_profiles = set(sources.profiles) - registered
    unprofiled = registered - set(sources.profiles)
    if unmatched_profiles:
        raise ValueError(
            f"Source profiles without an aggregator: {', '.join(sorted(unmatched_profiles))}"
        )
    if unprofiled:
        raise ValueError(
            f"Aggregators without a source profile: {', '.join(sorted(unprofiled))}"
        )

    logger.info(f"✓ {len(aggregators)} aggregators initialized")
    return AggregatorManager(aggregators)


def initialize_runner(
    settings: Settings,
    aggregator_manager: AggregatorManager,
    dry_run: bool = False,
    backfill: bool = False,
) -> MonitorRunner:
    """Initialize the MonitorRunner and its storage.

    Args:
        settings: Loaded settings object.
        aggregator_manager: Initialized aggregator manager.
        dry_run: Suppress all writes.
        backfill: Ignore intervals and write reports.

    Returns:
        MonitorRunner instance.
    """
    storage = settings.storage
    analyzer = TrendAnalyzer.from_settings(settings, history=InMemoryScoreHistory())
    logger.info("✓ TrendAnalyzer initialized")

    report_store = None
    if backfill or settings.runner.write_reports:
        report_store = ReportStore(storage.reports_path)

    runner = MonitorRunner(
        monitor_store=MonitorStore(storage.monitors_path),
        alert_store=AlertStore(storage.alerts_path),
        data_loader=FetchedDataLoader(storage.fetched_path),
        aggregator_manager=aggregator_manager,
        analyzer=analyzer,
        formatter=AlertFormatter(max_articles=settings.runner.max_articles_in_alert),
        report_store=report_store,
        dry_run=dry_run,
        backfill=backfill,
    )
    logger.info("✓ MonitorRunner initialized")

    return runner


def run(argv: Optional[list[str]] = None) -> RunSummary:
    """Load settings, wire the components and run every due monitor."""
    args = create_parser().parse_args(argv)

    settings = load_and_validate_config(args.config)
    print_startup_banner(settings)

    dry_run = args.dry_run or settings.runner.dry_run
    backfill = args.backfill or settings.runner.backfill

    aggregator_manager = initialize_aggregators(settings)
    runner = initialize_runner(settings, aggregator_manager, dry_run=dry_run, backfill=backfill)

    summary = runner.run()
    for line in AlertFormatter().format_run_summary(summary).splitlines():
        logger.info(line)
    return summary


def main(argv: Optional[list[str]] = None) -> int:
    try:
        summary = run(argv)
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        return 1
    return summary.exit_code


if __name__ == "__main__":
    sys.exit(main())
