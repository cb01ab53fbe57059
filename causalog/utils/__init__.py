"""
Utility modules for the causal logging engine.
"""

from causalog.utils.logging import (
    get_logger,
    setup_logging,
    configure_from_settings,
    JSONFormatter,
    ContextLoggerAdapter,
    log_render_fault,
)
from causalog.utils.metrics import (
    SessionMetrics,
    emit_metric,
)
from causalog.utils.serialization import (
    SEEN_SENTINEL,
    SerializationPass,
    format_number,
    serialize,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "configure_from_settings",
    "JSONFormatter",
    "ContextLoggerAdapter",
    "log_render_fault",
    "SessionMetrics",
    "emit_metric",
    "SEEN_SENTINEL",
    "SerializationPass",
    "format_number",
    "serialize",
]
