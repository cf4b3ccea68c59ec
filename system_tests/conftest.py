"""
System Test Configuration - pytest fixtures for the functional verification tests.

This conftest sets up the FVT environment where:
1. Tests run against a live server platform (no fakes)
2. Every test is parametrized over the connection table at its call site
3. Each test instance owns its own clients, closed after the test
4. The platform and servers are checked once before any test
5. Failed verifications leave a JSON/markdown report behind

CRITICAL: This file must be in system_tests/ to apply only to system tests.
The tests/ folder uses its own conftest with the in-process fake platform.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Generator

import pytest

from metadata_fvt.clients.data_engine import DataEngineClient
from metadata_fvt.clients.repository import RepositoryService
from metadata_fvt.clients.subject_area import SubjectAreaClient
from metadata_fvt.connection import ConnectionDetails
from metadata_fvt.core.exceptions import FVTException
from metadata_fvt.core.logging import scenario_id_var, setup_logging
from metadata_fvt.harness.failures import VerificationFailure
from system_tests.config import SystemTestConfig, get_config
from system_tests.fixtures.platform_health import PlatformHealthChecker
from system_tests.reporters.failure_report import FailureReport


# =============================================================================
# CONFIGURATION
# =============================================================================


@pytest.fixture(scope="session")
def system_config() -> SystemTestConfig:
    """Load system test configuration from environment."""
    setup_logging()
    return get_config()


# =============================================================================
# PLATFORM HEALTH CHECK (Session-scoped)
# =============================================================================


@pytest.fixture(scope="session")
def platform_health(system_config: SystemTestConfig) -> Generator[PlatformHealthChecker, None, None]:
    """Create platform health checker for every server in the connection table."""
    checker = PlatformHealthChecker(system_config.connection_table(), system_config)
    yield checker
    checker.close()


@pytest.fixture(scope="session", autouse=True)
def verify_platform_healthy(
    platform_health: PlatformHealthChecker,
    system_config: SystemTestConfig,
):
    """
    Verify the platform and its servers are active before running any tests.

    Skips the session when the platform is unreachable, or fails it in
    strict mode (FVT_STRICT=1).
    """
    print("\n" + "=" * 60)
    print("🔍 OPEN METADATA FUNCTIONAL VERIFICATION")
    print("=" * 60)
    print(f"  Platform: {system_config.platform_url}")
    print(f"  Servers: {', '.join(system_config.servers)}")
    print(f"  User: {system_config.user_id}")
    print("=" * 60)

    try:
        platform_health.wait_for_healthy()
        print("\n✅ Platform and servers active, starting verification...\n")
    except AssertionError as e:
        platform_health.print_status()
        if system_config.strict_mode:
            pytest.fail(str(e))
        pytest.skip(f"Platform not available: {e}")


# =============================================================================
# CLIENTS (Per-test)
# =============================================================================


@pytest.fixture
def connection(system_config: SystemTestConfig) -> ConnectionDetails:
    """First connection in the table; tests override it by parametrizing ``connection``."""
    return system_config.connection_table()[0]


@pytest.fixture
def user_id(connection: ConnectionDetails) -> str:
    return connection.user_id


@pytest.fixture
def data_engine_client(connection: ConnectionDetails) -> Generator[DataEngineClient, None, None]:
    with connection.data_engine_client() as client:
        yield client


@pytest.fixture
def repository_service(connection: ConnectionDetails) -> Generator[RepositoryService, None, None]:
    with connection.repository_service() as service:
        yield service


@pytest.fixture
def subject_area_client(connection: ConnectionDetails) -> Generator[SubjectAreaClient, None, None]:
    with connection.subject_area_client() as client:
        yield client


@pytest.fixture(autouse=True)
def scenario_label(request: pytest.FixtureRequest):
    """Tag log lines emitted during the test with its name."""
    token = scenario_id_var.set(request.node.name)
    yield
    scenario_id_var.reset(token)


# =============================================================================
# PYTEST HOOKS FOR FAILURE REPORTING
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers",
        "workflow: Scenario that submits metadata and verifies it in the repository",
    )
    config.addinivalue_line(
        "markers",
        "smoke: Quick check that the platform and servers are usable",
    )


def pytest_collection_modifyitems(config, items):
    """Add markers based on test location."""
    for item in items:
        if "/smoke/" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)

        if "/workflows/" in str(item.fspath):
            item.add_marker(pytest.mark.workflow)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Write a failure report when a test's call phase fails."""
    outcome = yield
    report = outcome.get_result()

    if report.when != "call" or not report.failed or call.excinfo is None:
        return

    exc = call.excinfo.value
    if isinstance(exc, VerificationFailure):
        details = exc.details
    elif isinstance(exc, FVTException):
        details = exc.to_dict()
    else:
        details = {}

    connection = item.funcargs.get("connection")
    end = datetime.now(UTC)
    failure = FailureReport(
        test_id=item.nodeid,
        test_name=item.name,
        test_start=datetime.fromtimestamp(call.start, UTC),
        test_end=end,
        endpoint=getattr(connection, "endpoint", None),
        server_name=getattr(connection, "server_name", None),
        user_id=getattr(connection, "user_id", None),
        failure_type=type(exc).__name__,
        failure_message=str(exc),
        failure_details=details,
        traceback=str(report.longrepr),
    )
    path = failure.save(get_config().report_dir)
    path.with_suffix(".md").write_text(failure.to_markdown())
    report.sections.append(("fvt failure report", str(path)))
