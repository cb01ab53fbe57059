"""
Metrics collection and emission for observability.

This module provides per-session counters for a LoggingConsole:
- Display identities assigned
- Causal trees expanded and back-references emitted
- Sink calls per level
- Contained rendering faults
"""

from datetime import datetime, timezone
from typing import Optional, Dict, Any

from causalog.utils.logging import get_logger

logger = get_logger(__name__)


class SessionMetrics:
    """
    Collects metrics for one logging session.

    Tracks:
    - Session start time
    - Identity assignment and expansion counts
    - Sink call counts per level
    - Render faults
    """

    def __init__(self, session_id: str):
        """
        Initialize metrics collector.

        Args:
            session_id: Session ID
        """
        self.session_id = session_id

        self.start_time: datetime = datetime.now(timezone.utc)

        self.identities_assigned: int = 0
        self.trees_expanded: int = 0
        self.back_references: int = 0

        self.sink_calls: Dict[str, int] = {}

        self.render_faults: int = 0
        self.last_fault: Optional[str] = None

    def record_identity(self) -> None:
        self.identities_assigned += 1

    def record_expansion(self) -> None:
        self.trees_expanded += 1

    def record_back_reference(self) -> None:
        self.back_references += 1

    def record_sink_call(self, level: str) -> None:
        """
        Record one call forwarded to the sink.

        Args:
            level: Sink method name ('debug', 'log', 'group', ...)
        """
        self.sink_calls[level] = self.sink_calls.get(level, 0) + 1

    def record_render_fault(self, error: BaseException) -> None:
        """
        Record a contained rendering failure.

        Args:
            error: The exception that was contained
        """
        self.render_faults += 1
        self.last_fault = type(error).__name__

    def get_metrics_summary(self) -> Dict[str, Any]:
        """
        Get summary of collected metrics.

        Returns:
            Dictionary of metrics
        """
        summary = {
            "session_id": self.session_id,
            "start_time": self.start_time.isoformat(),
            "identities_assigned": self.identities_assigned,
            "trees_expanded": self.trees_expanded,
            "back_references": self.back_references,
            "sink_calls": dict(self.sink_calls),
            "render_faults": self.render_faults,
        }

        if self.last_fault:
            summary["last_fault"] = self.last_fault

        return summary


def emit_metric(metric_name: str, value: float, **tags: Any) -> None:
    """
    Emit a metric by logging it on the package logger.

    Args:
        metric_name: Metric name
        value: Metric value
        **tags: Metric tags/labels
    """
    logger.info(
        f"Metric: {metric_name}",
        extra={
            "metric_name": metric_name,
            "metric_value": value,
            "metric_tags": tags,
        }
    )
