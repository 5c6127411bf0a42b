#!/usr/bin/env python3
"""Interactive terminal client for the scaffold server."""

import argparse
import asyncio
import logging
import sys
from typing import Awaitable, Callable, Optional

from scaffold.client.checker import HealthChecker
from scaffold.client.dashboard import Dashboard
from scaffold.config import get_api_url

logger = logging.getLogger(__name__)

COUNT_COMMANDS = {"c", "count"}
REFRESH_COMMANDS = {"r", "refresh"}
QUIT_COMMANDS = {"q", "quit", "exit"}
HELP_LINE = "Commands: c(ount), r(efresh), q(uit); empty line redraws"

LineReader = Callable[[], Awaitable[Optional[str]]]


async def read_stdin_line() -> Optional[str]:
    """Read one line off the event loop thread; None means end of input."""
    loop = asyncio.get_running_loop()
    try:
        return await loop.run_in_executor(None, input, "> ")
    except EOFError:
        return None


async def run_dashboard(dashboard: Dashboard, read_line: LineReader = read_stdin_line,
                        write: Callable[[str], None] = print) -> None:
    dashboard.mount()
    write(dashboard.render())

    try:
        while True:
            line = await read_line()
            if line is None:
                break
            command = line.strip().lower()

            if command in QUIT_COMMANDS:
                break
            elif command in COUNT_COMMANDS:
                dashboard.increment()
            elif command in REFRESH_COMMANDS:
                if dashboard.start_refresh() is None:
                    write("Health check already in progress")
            elif command:
                write(HELP_LINE)
                continue

            write(dashboard.render())
    finally:
        await dashboard.close()


def main() -> None:
    """Main entry point for the terminal client."""
    parser = argparse.ArgumentParser(description="Scaffold Health Dashboard")
    parser.add_argument("--api-url", default=None,
                        help="Base API URL (defaults to $API_URL)")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level, format='%(levelname)s: %(message)s')

    api_url = args.api_url or get_api_url()
    logger.info(f"API Base URL: {api_url}")

    dashboard = Dashboard(HealthChecker(api_url))
    try:
        asyncio.run(run_dashboard(dashboard))
    except KeyboardInterrupt:
        logger.warning("Client interrupted by user")
        sys.exit(130)


if __name__ == "__main__":
    main()
