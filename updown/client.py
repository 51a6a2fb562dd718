from __future__ import annotations

from typing import Callable

from .checks import CheckService
from .config import Config
from .downtimes import DowntimeService
from .metrics import MetricService
from .net_http import HttpClient
from .nodes import NodeService
from .recipients import RecipientService
from .status_pages import StatusPageService


class Client:
    """
    updown.io API client.

    Resources hang off the instance (``client.check.list()``,
    ``client.status_page.get(token)``...). The alias cache used by
    ``client.check.token_for_alias`` lives as long as the client.
    """

    def __init__(
        self,
        api_key: str | None = None,
        cfg: Config | None = None,
        http: HttpClient | None = None,
        log_fn: Callable[[str], None] | None = None,
    ) -> None:
        self.cfg = cfg or Config.load()
        self.http = http or HttpClient(self.cfg, api_key=api_key, log_fn=log_fn)

        self.check = CheckService(self.http, log_fn=log_fn)
        self.downtime = DowntimeService(self.http)
        self.metric = MetricService(self.http)
        self.node = NodeService(self.http)
        self.recipient = RecipientService(self.http)
        self.status_page = StatusPageService(self.http)
