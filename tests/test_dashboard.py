import asyncio

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from scaffold.client.checker import HealthChecker
from scaffold.client.cli import run_dashboard
from scaffold.client.dashboard import Dashboard
from scaffold.client.state import STATUS_CHECKING, STATUS_HEALTHY, STATUS_UNREACHABLE, Counter


class GatedBackend:
    """Stub backend whose health responses wait until released."""

    def __init__(self):
        self.requests = 0
        self.arrived = asyncio.Event()
        self.release = asyncio.Event()
        self.server = None

    async def handler(self, request):
        self.requests += 1
        self.arrived.set()
        await self.release.wait()
        return web.json_response({"status": "OK", "Message": "Server is running"})

    async def __aenter__(self):
        web_app = web.Application()
        web_app.router.add_get("/api/health", self.handler)
        self.server = TestServer(web_app)
        await self.server.start_server()
        return self

    async def __aexit__(self, *exc):
        self.release.set()
        await self.server.close()

    @property
    def api_url(self) -> str:
        return str(self.server.make_url("/api"))


def scripted_reader(lines):
    pending = list(lines)

    async def read_line():
        await asyncio.sleep(0)
        return pending.pop(0) if pending else None

    return read_line


@pytest.mark.parametrize("clicks", [0, 1, 7, 100])
def test_counter_shows_number_of_activations(clicks):
    dashboard = Dashboard(HealthChecker("http://localhost:8000/api"))
    for _ in range(clicks):
        dashboard.increment()
    assert dashboard.counter.value == clicks
    assert f"count is {clicks}" in dashboard.render()


def test_counter_does_not_touch_health_status():
    dashboard = Dashboard(HealthChecker("http://localhost:8000/api"), Counter(value=3))
    dashboard.increment()
    assert dashboard.counter.value == 4
    assert dashboard.status.text == STATUS_CHECKING
    assert dashboard.status.checking is False


def test_initial_render_shows_checking_and_enabled_refresh():
    view = Dashboard(HealthChecker("http://localhost:8000/api")).render()
    assert "API Health Check" in view
    assert STATUS_CHECKING in view
    assert "[Refresh]" in view


def test_refresh_is_ignored_while_check_in_progress():
    async def scenario():
        async with GatedBackend() as backend:
            dashboard = Dashboard(HealthChecker(backend.api_url))
            first = asyncio.ensure_future(dashboard.refresh())
            await backend.arrived.wait()

            assert dashboard.refresh_enabled is False
            assert "[Refreshing...] (disabled)" in dashboard.render()
            second = await dashboard.refresh()
            scheduled = dashboard.start_refresh()

            backend.release.set()
            assert await first is True
            return second, scheduled, backend.requests, dashboard

    second, scheduled, requests, dashboard = asyncio.run(scenario())
    assert second is False
    assert scheduled is None
    assert requests == 1
    assert dashboard.refresh_enabled is True
    assert dashboard.status.text == STATUS_HEALTHY


def test_refresh_is_available_again_after_completion(closed_port):
    async def scenario():
        dashboard = Dashboard(HealthChecker(f"http://127.0.0.1:{closed_port}/api"))
        results = [await dashboard.refresh(), await dashboard.refresh()]
        return results, dashboard

    results, dashboard = asyncio.run(scenario())
    assert results == [True, True]
    assert dashboard.status.text == STATUS_UNREACHABLE
    assert dashboard.status.checking is False


def test_mount_checks_only_once():
    async def scenario():
        async with GatedBackend() as backend:
            backend.release.set()
            dashboard = Dashboard(HealthChecker(backend.api_url))
            task = dashboard.mount()
            await task
            again = dashboard.mount()
            return again, backend.requests, dashboard.status.text

    again, requests, text = asyncio.run(scenario())
    assert again is None
    assert requests == 1
    assert text == STATUS_HEALTHY


def test_cli_counts_and_quits(closed_port):
    output = []
    dashboard = Dashboard(HealthChecker(f"http://127.0.0.1:{closed_port}/api"))
    asyncio.run(run_dashboard(dashboard, scripted_reader(["c", "count", "", "q"]), output.append))

    assert dashboard.counter.value == 2
    assert "count is 2" in output[-1]


def test_cli_reports_refresh_while_busy():
    async def scenario():
        output = []
        async with GatedBackend() as backend:
            dashboard = Dashboard(HealthChecker(backend.api_url))
            lines = ["r", "q"]

            async def read_after_first_request():
                await backend.arrived.wait()
                return lines.pop(0)

            await run_dashboard(dashboard, read_after_first_request, output.append)
            return output, backend.requests

    output, requests = asyncio.run(scenario())
    assert "Health check already in progress" in output
    assert requests == 1


def test_cli_unknown_command_prints_help(closed_port):
    output = []
    dashboard = Dashboard(HealthChecker(f"http://127.0.0.1:{closed_port}/api"))
    asyncio.run(run_dashboard(dashboard, scripted_reader(["dance"]), output.append))
    assert any(line.startswith("Commands:") for line in output)


def test_cli_end_of_input_cancels_outstanding_check():
    async def scenario():
        async with GatedBackend() as backend:
            dashboard = Dashboard(HealthChecker(backend.api_url))
            await run_dashboard(dashboard, scripted_reader([]), lambda _: None)
            return dashboard

    dashboard = asyncio.run(scenario())
    assert dashboard.status.checking is False
    assert dashboard.refresh_enabled is True
