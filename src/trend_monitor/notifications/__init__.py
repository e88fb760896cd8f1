"""Notifications module for trend alerts."""

from .alert_formatter import AlertFormatter
from .models import Alert, AlertType, new_alert_id

__all__ = ["Alert", "AlertFormatter", "AlertType", "new_alert_id"]
