"""
Observability components.

Provides contextual logging, metrics collection and health checks.
"""

from .health import HealthCheckResult, HealthStatus, check_engine, health_report, ping_database
from .logging import (
    ContextualLoggerAdapter,
    clear_component_context,
    clear_correlation_id,
    configure_logging,
    get_correlation_id,
    get_logger,
    get_logging_context,
    set_component_context,
    set_correlation_id,
)
from .metrics import (
    MetricsCollector,
    OperationMetrics,
    get_metrics_collector,
    record_operation,
    timed_operation,
)

__all__ = [
    # Metrics
    "MetricsCollector",
    "OperationMetrics",
    "get_metrics_collector",
    "record_operation",
    "timed_operation",
    # Logging
    "get_correlation_id",
    "set_correlation_id",
    "clear_correlation_id",
    "set_component_context",
    "clear_component_context",
    "configure_logging",
    "get_logging_context",
    "ContextualLoggerAdapter",
    "get_logger",
    # Health
    "HealthStatus",
    "HealthCheckResult",
    "check_engine",
    "ping_database",
    "health_report",
]
