# src/trend_monitor/notifications/models.py
"""Data models for notifications."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class AlertType(Enum):
    """Type of alert record."""

    TREND = "TREND"


def new_alert_id(now: datetime) -> str:
    """Unique alert id of the form trend-alert-<epoch ms>-<4 hex chars>."""
    return f"trend-alert-{int(now.timestamp() * 1000)}-{uuid.uuid4().hex[:4]}"


@dataclass
class Alert:
    """A trend alert raised when a monitor's score crosses its threshold.

    Attributes:
        alert_id: Unique identifier of the alert.
        alert_type: Type of alert.
        monitor_id: Monitor that raised the alert.
        entity: The monitor's terms, comma separated.
        content: One-line alert text.
        confidence: Confidence percent of the scoring pass.
        message: Fully formatted alert body.
        timestamp: When the alert was created.
        processed: Whether a downstream consumer handled the alert.
    """

    alert_id: str
    alert_type: AlertType
    monitor_id: str
    entity: str
    content: str
    confidence: int = 0
    message: str = ""
    timestamp: datetime = field(default_factory=datetime.now)
    processed: bool = False

    def to_record(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "alert_id": self.alert_id,
            "alert_type": self.alert_type.value,
            "monitor_id": self.monitor_id,
            "entity": self.entity,
            "content": self.content,
            "confidence": self.confidence,
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
            "processed": self.processed,
        }

    @classmethod
    def from_record(cls, record: dict) -> "Alert":
        return cls(
            alert_id=record["alert_id"],
            alert_type=AlertType(record.get("alert_type", AlertType.TREND.value)),
            monitor_id=record["monitor_id"],
            entity=record.get("entity", ""),
            content=record.get("content", ""),
            confidence=record.get("confidence", 0),
            message=record.get("message", ""),
            timestamp=datetime.fromisoformat(record["timestamp"]),
            processed=record.get("processed", False),
        )
