#!/usr/bin/env python3
"""Smoke checks against a running scaffold server."""

import argparse
import asyncio
import logging
import sys
from typing import Any, Dict, Optional

import aiohttp

from scaffold.config import get_api_url

logger = logging.getLogger(__name__)

EXPECTED_BODIES: Dict[str, Dict[str, Any]] = {
    "/health": {"status": "OK", "Message": "Server is running"},
    "/get": {"message": "GET request successful"},
}


async def check_endpoint(session: aiohttp.ClientSession, base_url: str, path: str) -> bool:
    """GET one endpoint and compare status and body with the expected payload."""
    url = f"{base_url}{path}"
    logger.info(f"Testing {url}")
    async with session.get(url) as response:
        if response.status != 200:
            text = await response.text()
            logger.error(f"{path} failed: {response.status} - {text}")
            return False
        try:
            data = await response.json()
        except ValueError as e:
            logger.error(f"{path} returned malformed JSON: {e}")
            return False
        if data != EXPECTED_BODIES[path]:
            logger.error(f"{path} returned unexpected body: {data}")
            return False
        logger.info(f"{path} passed: {data}")
        return True


async def run_checks(base_url: str, timeout: Optional[aiohttp.ClientTimeout] = None) -> bool:
    """Run every endpoint check and return success status."""
    base_url = base_url.rstrip("/")
    logger.info(f"Starting smoke checks against {base_url}")

    try:
        session_kwargs = {"timeout": timeout} if timeout is not None else {}
        async with aiohttp.ClientSession(**session_kwargs) as session:
            results = [await check_endpoint(session, base_url, path) for path in EXPECTED_BODIES]
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        logger.error(f"Server unreachable: {e!r}")
        return False

    if all(results):
        logger.info("All checks completed successfully")
        return True
    return False


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Scaffold server smoke checks")
    parser.add_argument("--api-url", default=None, help="Base API URL (defaults to $API_URL)")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')

    try:
        success = asyncio.run(run_checks(args.api_url or get_api_url()))
        sys.exit(0 if success else 1)
    except KeyboardInterrupt:
        logger.warning("Checks interrupted by user")
        sys.exit(130)


if __name__ == "__main__":
    main()
