"""
Prometheus Metrics for the marketplace backend.

DEPENDENCY:
    pip install prometheus-client

DATA FLOW:
    This file                  presentation/api/metrics.py         Observability Stack
    ─────────                  ────────────────────────────         ───────────────────
    Define metrics ──────────► /metrics endpoint ──────────────►   Prometheus ──► Grafana

METRIC TYPES:
    - Counter: Value only goes up (total count, e.g., messages sent)
    - Histogram: Distribution (for percentiles like P95, e.g., latency)
"""

from prometheus_client import (
    Histogram,
    Counter,
    generate_latest,
    CONTENT_TYPE_LATEST,
)


# =============================================================================
# METRICS DEFINITIONS
# =============================================================================
REQUEST_LATENCY = Histogram(
    "http_server_request_duration_seconds",
    "Http request latency in seconds",
    ["method", "route", "http_status_code"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1, 2, 5],
)

CHAT_ROOMS_TOTAL = Counter(
    "market_chat_rooms_total",
    "Chat room get-or-create calls by outcome",
    ["outcome"],
)

MESSAGES_SENT_TOTAL = Counter(
    "market_messages_sent_total",
    "Total number of chat messages appended",
)

MESSAGES_READ_TOTAL = Counter(
    "market_messages_read_total",
    "Total number of messages transitioned to read",
)

LIKE_ACTIONS_TOTAL = Counter(
    "market_like_actions_total",
    "Like/unlike actions that changed the like relation",
    ["action"],
)

REPUTATION_FAILURES_TOTAL = Counter(
    "market_reputation_update_failures_total",
    "Reputation side-effects that could not be applied",
    ["direction"],
)

ERRORS_TOTAL = Counter(
    "market_errors_total",
    "Total number of domain errors returned to callers, by kind",
    ["error_type"],
)


# =============================================================================
# LABEL CONSTANTS (avoid hardcoding strings throughout codebase)
# =============================================================================
class RoomOutcome:
    CREATED = "created"
    EXISTING = "existing"


class LikeAction:
    LIKE = "like"
    UNLIKE = "unlike"


class MetricsErrorType:
    """Error type labels for market_errors_total metric."""

    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INVALID_STATE = "invalid_state"
    INVALID_INPUT = "invalid_input"


# =============================================================================
# RECORDING FUNCTIONS
# =============================================================================
def observe_request_latency(method: str, route: str, status_code: int, duration: float):
    """Call to record request latency. Integration point: fastapi_app.MetricsMiddleware"""
    REQUEST_LATENCY.labels(
        method=method, route=route, http_status_code=str(status_code)
    ).observe(duration)


def increment_chat_room(outcome: str):
    """Integration point: GetOrCreateChatRoomHandler"""
    CHAT_ROOMS_TOTAL.labels(outcome=outcome).inc()


def increment_messages_sent():
    MESSAGES_SENT_TOTAL.inc()


def increment_messages_read(count: int):
    if count > 0:
        MESSAGES_READ_TOTAL.inc(count)


def increment_like_action(action: str):
    LIKE_ACTIONS_TOTAL.labels(action=action).inc()


def increment_reputation_failure(direction: str):
    """Integration point: AddLikeHandler / RemoveLikeHandler when the ledger fails"""
    REPUTATION_FAILURES_TOTAL.labels(direction=direction).inc()


def increment_error(error_type: str):
    """
    Call to record a domain error returned to a caller.

    Integration point: presentation/errors.py exception handlers
    """
    ERRORS_TOTAL.labels(error_type=error_type).inc()


# =============================================================================
# HELPER FOR /metrics ENDPOINT
# =============================================================================
def get_metrics_content():
    """
    Generate Prometheus metrics output.

    Called by: presentation/api/metrics.py

    Returns:
        Tuple of (content_bytes, content_type_string)
    """
    return generate_latest(), CONTENT_TYPE_LATEST


__all__ = [
    "observe_request_latency",
    "increment_chat_room",
    "increment_messages_sent",
    "increment_messages_read",
    "increment_like_action",
    "increment_reputation_failure",
    "increment_error",
    "get_metrics_content",
    "RoomOutcome",
    "LikeAction",
    "MetricsErrorType",
]
