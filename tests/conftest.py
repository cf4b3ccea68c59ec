"""Pytest configuration and fixtures."""

from __future__ import annotations

from typing import Generator

import httpx
import pytest

from metadata_fvt.clients.data_engine import DataEngineClient
from metadata_fvt.clients.repository import RepositoryService
from metadata_fvt.clients.subject_area import SubjectAreaClient
from metadata_fvt.connection import BackendVariant, ConnectionDetails, build_connection_table
from metadata_fvt.core.logging import scenario_id_var
from tests.fake_platform import FakePlatform


PLATFORM_URL = "https://fake-platform:9443"
USER_ID = "garygeeke"


@pytest.fixture
def fake_platform() -> FakePlatform:
    """A fresh fake platform hosting both backend variants."""
    return FakePlatform()


@pytest.fixture
def http_client(fake_platform: FakePlatform) -> Generator[httpx.Client, None, None]:
    with fake_platform.client() as client:
        yield client


@pytest.fixture
def connection_table() -> list[ConnectionDetails]:
    return build_connection_table(PLATFORM_URL, USER_ID)


@pytest.fixture(params=list(BackendVariant), ids=lambda variant: variant.name.lower())
def connection(request: pytest.FixtureRequest) -> ConnectionDetails:
    """One connection per backend variant."""
    return ConnectionDetails(endpoint=PLATFORM_URL, backend=request.param, user_id=USER_ID)


@pytest.fixture
def data_engine_client(
    connection: ConnectionDetails,
    http_client: httpx.Client,
) -> Generator[DataEngineClient, None, None]:
    with connection.data_engine_client(http_client) as client:
        yield client


@pytest.fixture
def repository_service(
    connection: ConnectionDetails,
    http_client: httpx.Client,
) -> Generator[RepositoryService, None, None]:
    with connection.repository_service(http_client) as service:
        yield service


@pytest.fixture
def subject_area_client(
    connection: ConnectionDetails,
    http_client: httpx.Client,
) -> Generator[SubjectAreaClient, None, None]:
    with connection.subject_area_client(http_client) as client:
        yield client


@pytest.fixture(autouse=True)
def reset_scenario_id():
    """Keep the scenario context variable from leaking between tests."""
    token = scenario_id_var.set(None)
    yield
    scenario_id_var.reset(token)
