"""
Platform Health Checker - Verify the server platform is up before tests.

Checks that the platform answers and that every server in the connection
table is active, so scenario failures point at the services under test and
not at a platform that never started.
"""

from __future__ import annotations

import time
from dataclasses import dataclass

import httpx

from metadata_fvt.connection import ConnectionDetails
from system_tests.config import SystemTestConfig


@dataclass
class HealthCheckResult:
    """Result of a health check."""

    name: str
    healthy: bool
    message: str
    details: dict | None = None


class PlatformHealthChecker:
    """
    Verify the platform and its servers are available.

    Checks:
    1. Platform origin endpoint responds
    2. Each configured server is active
    """

    def __init__(
        self,
        connections: list[ConnectionDetails],
        config: SystemTestConfig,
        transport: httpx.BaseTransport | None = None,
    ):
        self.connections = connections
        self.config = config
        self._client = httpx.Client(
            verify=config.verify_ssl,
            timeout=config.platform_timeout,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    @property
    def platform_services_url(self) -> str:
        return (
            f"{self.config.platform_url}/open-metadata/platform-services/"
            f"users/{self.config.user_id}/server-platform"
        )

    def check_all(self) -> list[HealthCheckResult]:
        """Run all health checks and return results."""
        results = [self._check_platform()]
        if not results[0].healthy:
            return results

        for connection in self.connections:
            results.append(self._check_server(connection.server_name))

        return results

    def assert_healthy(self) -> None:
        """Assert that all checks pass, raise if any fail."""
        failures = [r for r in self.check_all() if not r.healthy]

        if failures:
            messages = "\n".join(f"  ❌ {r.name}: {r.message}" for r in failures)
            raise AssertionError(
                f"Platform health check failed:\n{messages}\n\n"
                f"Start a platform with the servers {[c.server_name for c in self.connections]} "
                f"configured and set FVT_PLATFORM_URL to its root URL."
            )

    def wait_for_healthy(
        self,
        timeout: float | None = None,
        poll_interval: float = 2.0,
    ) -> None:
        """Wait for the platform to become healthy."""
        timeout = timeout if timeout is not None else self.config.platform_startup_timeout
        start = time.time()

        while (time.time() - start) < timeout:
            try:
                self.assert_healthy()
                return
            except AssertionError:
                time.sleep(poll_interval)

        # Final check with full error
        self.assert_healthy()

    def _check_platform(self) -> HealthCheckResult:
        """Check that the platform origin endpoint responds."""
        url = f"{self.platform_services_url}/origin"
        try:
            response = self._client.get(url)
        except httpx.RequestError as e:
            return HealthCheckResult(
                name="platform:origin",
                healthy=False,
                message=f"Cannot connect to {self.config.platform_url}: {e}",
            )

        if response.status_code != 200:
            return HealthCheckResult(
                name="platform:origin",
                healthy=False,
                message=f"Origin endpoint returned HTTP {response.status_code}",
            )

        return HealthCheckResult(
            name="platform:origin",
            healthy=True,
            message="Platform responding",
            details={"origin": response.text[:200]},
        )

    def _check_server(self, server_name: str) -> HealthCheckResult:
        """Check that a server is active on the platform."""
        url = f"{self.platform_services_url}/servers/{server_name}/is-active"
        try:
            response = self._client.get(url)
            body = response.json()
        except (httpx.RequestError, ValueError) as e:
            return HealthCheckResult(
                name=f"server:{server_name}",
                healthy=False,
                message=f"Error checking server: {e}",
            )

        if response.status_code == 200 and body.get("flag") is True:
            return HealthCheckResult(
                name=f"server:{server_name}",
                healthy=True,
                message="Server active",
            )

        return HealthCheckResult(
            name=f"server:{server_name}",
            healthy=False,
            message="Server not active",
            details=body if isinstance(body, dict) else None,
        )

    def print_status(self) -> None:
        """Print current platform status to stdout."""
        results = self.check_all()

        print("\n" + "=" * 60)
        print("PLATFORM HEALTH STATUS")
        print("=" * 60)

        for result in results:
            icon = "✅" if result.healthy else "❌"
            print(f"  {icon} {result.name}: {result.message}")

        print("=" * 60 + "\n")
