from .constants import __version__
from .config import Config
from .net_http import HttpClient
from .alias_cache import AliasCache
from .client import Client
from .checks import Check, CheckItem, SSL
from .downtimes import Downtime
from .metrics import Metric
from .nodes import Node
from .recipients import Recipient, RecipientItem, RecipientType
from .status_pages import StatusPage, StatusPageItem
from .errors import (
    ApiError,
    AuthError,
    DecodeError,
    NotFoundError,
    RateLimitError,
    TokenNotFoundError,
    TransportError,
    UpdownError,
    ValidationError,
)

__all__ = [
    "__version__",
    "Config",
    "HttpClient",
    "AliasCache",
    "Client",
    "Check",
    "CheckItem",
    "SSL",
    "Downtime",
    "Metric",
    "Node",
    "Recipient",
    "RecipientItem",
    "RecipientType",
    "StatusPage",
    "StatusPageItem",
    "UpdownError",
    "ApiError",
    "AuthError",
    "DecodeError",
    "NotFoundError",
    "RateLimitError",
    "TokenNotFoundError",
    "TransportError",
    "ValidationError",
]
