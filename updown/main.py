from __future__ import annotations

import argparse
from typing import Callable

from .client import Client
from .config import Config
from .errors import TokenNotFoundError, UpdownError


def health_check(cfg: Config, logger=print) -> bool:
    """
    Offline health check: validates configuration without network calls.
    Returns True/False and prints brief report.
    """
    ok = True
    if not cfg.api_key:
        logger("[health] FAIL: UPDOWN_API_KEY not set")
        ok = False
    else:
        logger(f"[health] api_key: ***{cfg.api_key[-4:]} - OK")

    if not cfg.base_url.startswith(("http://", "https://")):
        logger(f"[health] FAIL: UPDOWN_BASE_URL is not an http(s) URL: {cfg.base_url}")
        ok = False
    else:
        logger(f"[health] base_url: {cfg.base_url} - OK")

    logger(f"[health] timeout_s: {cfg.timeout_s} retries: {cfg.max_retries}")
    logger(f"[health] offline check: {'PASS' if ok else 'FAIL'}")
    return ok


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="updown", description="updown.io API client")
    parser.add_argument("--env-file", default=None, help="dotenv file to load before reading UPDOWN_* variables")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("checks", help="list checks (token, alias, url)")
    token = sub.add_parser("token", help="resolve a check alias to its token")
    token.add_argument("alias")
    sub.add_parser("nodes", help="list monitoring nodes")
    sub.add_parser("health", help="offline config check")
    return parser


def main(
    argv: list[str] | None = None,
    client: Client | None = None,
    out: Callable[[str], None] = print,
) -> int:
    args = _build_parser().parse_args(argv)

    cfg = client.cfg if client is not None else Config.load(args.env_file)
    if args.command == "health":
        return 0 if health_check(cfg, logger=out) else 1

    client = client or Client(cfg=cfg)
    try:
        if args.command == "checks":
            for check in client.check.list():
                out(f"{check.token}\t{check.alias}\t{check.url}")
        elif args.command == "token":
            out(client.check.token_for_alias(args.alias))
        elif args.command == "nodes":
            for name, node in sorted(client.node.list().items()):
                out(f"{name}\t{node.ip}\t{node.ip6}\t{node.city}, {node.country}")
    except TokenNotFoundError as e:
        out(f"[token] {e}")
        return 1
    except UpdownError as e:
        out(f"[error] {type(e).__name__}: {e}")
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
