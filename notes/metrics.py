"""Prometheus metrics for the notes client.

All metric objects are defined here so they can be imported from any module.
``start_metrics_server`` exposes them over HTTP for scraping.
"""

import logging

from prometheus_client import Counter, Gauge, Histogram, start_http_server

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Store call metrics
# ---------------------------------------------------------------------------

STORE_REQUESTS = Counter(
    "notes_store_requests_total",
    "Total number of notes store calls",
    ["operation", "status"],  # status: success, error
)

STORE_DURATION = Histogram(
    "notes_store_duration_seconds",
    "Duration of notes store calls in seconds",
    ["operation"],
    buckets=(0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

# ---------------------------------------------------------------------------
# Optimistic update metrics
# ---------------------------------------------------------------------------

ROLLBACKS = Counter(
    "notes_rollbacks_total",
    "Optimistic mutations reverted after a store failure",
    ["operation"],  # create, update, delete
)

PENDING_OPERATIONS = Gauge(
    "notes_pending_operations",
    "Number of optimistic mutations awaiting the store",
)

# ---------------------------------------------------------------------------
# Exposition
# ---------------------------------------------------------------------------


def start_metrics_server(port: int) -> bool:
    """Serve the default registry on ``port``. A port of 0 disables it.

    Non-fatal if the port is taken. Returns whether the server started.
    """
    if not port:
        return False
    try:
        start_http_server(port)
    except OSError as e:
        logger.warning("Metrics server unavailable on port %d: %s", port, e)
        return False
    logger.info("Prometheus metrics served on :%d/metrics", port)
    return True
