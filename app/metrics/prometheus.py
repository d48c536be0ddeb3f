# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics — single source of truth for all metric objects.
Imported by services and middleware. Never instantiated in controllers.
"""

from prometheus_client import Counter, Gauge, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "roster_requests_total",
    "Total HTTP requests to roster service",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "roster_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)
HTTP_ERRORS = Counter(
    "roster_http_errors_total",
    "Total HTTP error responses",
    ["method", "endpoint", "status"],
)

# ── Business Metrics (updated by service layer only) ──
ROSTER_ROWS = Gauge(
    "roster_rows",
    "Number of stored roster rows (one per crew per cycle)",
)
ROSTER_CHANGES = Counter(
    "roster_changes_total",
    "Total roster row writes",
    ["operation"],
)
STAFF_RECORDS = Gauge(
    "roster_staff_records",
    "Number of crew master records",
)
POB_LOOKUPS = Counter(
    "roster_pob_lookups_total",
    "Total personnel-on-board lookups performed",
)
PERSONNEL_ON_BOARD = Gauge(
    "roster_personnel_on_board",
    "Personnel on board today, per client, as of the last unfiltered lookup",
    ["client"],
)
CERT_UPDATES = Counter(
    "roster_cert_updates_total",
    "Total training matrix writes",
    ["field"],
)
