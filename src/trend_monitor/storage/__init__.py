"""Storage adapters for monitors, alerts and fetched payloads."""

from trend_monitor.storage.alert_store import AlertStore
from trend_monitor.storage.fetched_data_loader import FetchedDataLoader
from trend_monitor.storage.monitor_store import MonitorStore, canonicalize_record
from trend_monitor.storage.report_store import ReportStore

__all__ = [
    "AlertStore",
    "FetchedDataLoader",
    "MonitorStore",
    "ReportStore",
    "canonicalize_record",
]
