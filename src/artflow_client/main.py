from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from dataclasses import replace

from artflow_client.adapters.inbound.cli import COMMANDS, run_cli
from artflow_client.adapters.outbound.console_input import ConsoleInputCollector
from artflow_client.adapters.outbound.http_gateway import (
    HttpStorefrontGateway,
    build_http_client,
)
from artflow_client.adapters.outbound.stdout_notifier import StdoutNotifier
from artflow_client.bootstrap import build_usecases
from artflow_client.config import Settings, load_settings


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="artflow", description="ArtFlow storefront client")
    parser.add_argument("--backend-url", help="storefront backend origin")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ...")
    parser.add_argument("command", choices=COMMANDS)
    parser.add_argument("ids", nargs="*", help="supply, artwork or post ids")
    return parser


async def _run(settings: Settings, command: str, ids: list[str]) -> int:
    async with build_http_client(settings.backend_url, settings.http_timeout) as client:
        usecases = build_usecases(
            settings,
            gateway=HttpStorefrontGateway(client),
            input=ConsoleInputCollector(),
            notifier=StdoutNotifier(),
        )
        return await run_cli(usecases, command, ids)


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv if argv is not None else sys.argv[1:])
    if args.command in ("buy", "inquire", "like") and not args.ids:
        print(f"usage: artflow {args.command} <id>{' ...' if args.command == 'buy' else ''}")
        return 2

    settings = load_settings()
    if args.backend_url:
        settings = replace(settings, backend_url=args.backend_url)
    if args.log_level:
        settings = replace(settings, log_level=args.log_level.upper())

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    return asyncio.run(_run(settings, args.command, args.ids))


if __name__ == "__main__":
    raise SystemExit(main())
