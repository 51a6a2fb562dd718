from __future__ import annotations

from typing import Set

__version__ = "1.0.0"

DEFAULT_BASE_URL = "https://updown.io/api/"
DEFAULT_USER_AGENT = f"updown-python/{__version__}"

API_KEY_HEADER = "X-API-KEY"

# Retried by the transport adapter; 429 is surfaced as RateLimitError instead
RETRY_STATUSES: Set[int] = {500, 502, 503, 504}
IDEMPOTENT_METHODS = frozenset(["GET", "PUT", "DELETE"])

# Metric grouping accepted by checks/{token}/metrics
METRIC_GROUPS: Set[str] = {"time", "host"}
