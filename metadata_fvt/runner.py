"""Table-driven runner: every scenario against every connection in the table."""

from __future__ import annotations

import time
import traceback
from dataclasses import dataclass, field
from typing import Callable, Iterable, Sequence

import httpx

from metadata_fvt.connection import ConnectionDetails
from metadata_fvt.core.config import settings
from metadata_fvt.core.exceptions import FVTException
from metadata_fvt.core.logging import LoggerAdapter, get_logger, scenario_id_var
from metadata_fvt.harness.failures import VerificationFailure
from metadata_fvt.scenarios.data_engine import DATA_ENGINE_SCENARIOS
from metadata_fvt.scenarios.subject_area import SubjectAreaDefinitionCategoryFVT


logger = get_logger("runner")

Scenario = Callable[[ConnectionDetails, httpx.Client], None]


def _data_engine_scenario(fn) -> Scenario:
    def run(connection: ConnectionDetails, http_client: httpx.Client) -> None:
        with connection.data_engine_client(http_client) as client, connection.repository_service(
            http_client
        ) as repository:
            fn(connection.user_id, client, repository)

    return run


def _subject_area_scenario(connection: ConnectionDetails, http_client: httpx.Client) -> None:
    with connection.subject_area_client(http_client) as client:
        SubjectAreaDefinitionCategoryFVT(client).run()


SCENARIOS: dict[str, Scenario] = {
    **{name: _data_engine_scenario(fn) for name, fn in DATA_ENGINE_SCENARIOS.items()},
    "subject_area_definition_category": _subject_area_scenario,
}


@dataclass
class ScenarioResult:
    scenario: str
    connection: ConnectionDetails
    passed: bool
    duration_seconds: float
    failure: str | None = None
    failure_type: str | None = None
    details: dict = field(default_factory=dict)

    @property
    def label(self) -> str:
        return f"{self.scenario}[{self.connection.id}]"


@dataclass
class RunReport:
    results: list[ScenarioResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(result.passed for result in self.results)

    @property
    def failures(self) -> list[ScenarioResult]:
        return [result for result in self.results if not result.passed]

    def summary(self) -> str:
        lines = [f"{len(self.results) - len(self.failures)}/{len(self.results)} scenarios passed"]
        for result in self.failures:
            lines.append(f"  FAILED {result.label}: {result.failure_type}: {result.failure}")
        return "\n".join(lines)


class FVTRunner:
    """Runs scenarios sequentially; a failure ends only its own scenario."""

    def __init__(
        self,
        scenarios: Sequence[str] | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        names = list(scenarios) if scenarios else list(SCENARIOS)
        unknown = [name for name in names if name not in SCENARIOS]
        if unknown:
            raise ValueError(f"Unknown scenarios {unknown}; available: {sorted(SCENARIOS)}")
        self.scenario_names = names
        self.transport = transport

    def _http_client(self) -> httpx.Client:
        return httpx.Client(
            transport=self.transport,
            verify=settings.verify_ssl,
            timeout=settings.request_timeout,
        )

    def run_scenario(self, name: str, connection: ConnectionDetails) -> ScenarioResult:
        label = f"{name}[{connection.id}]"
        token = scenario_id_var.set(label)
        log = LoggerAdapter(logger, {"server": connection.server_name, "user": connection.user_id})
        start = time.monotonic()
        try:
            with self._http_client() as http_client:
                SCENARIOS[name](connection, http_client)
        except VerificationFailure as exc:
            log.warning(f"{label} failed: {exc.message}")
            return self._result(name, connection, start, exc, exc.details)
        except FVTException as exc:
            log.warning(f"{label} aborted by {exc.error_code}: {exc.message}")
            return self._result(name, connection, start, exc, exc.to_dict())
        except AssertionError as exc:
            log.warning(f"{label} failed: {exc}")
            return self._result(name, connection, start, exc, {"traceback": traceback.format_exc()})
        except Exception as exc:
            log.exception(f"{label} errored: {exc}")
            return self._result(name, connection, start, exc, {"traceback": traceback.format_exc()})
        else:
            log.info(f"{label} passed")
            return ScenarioResult(
                scenario=name,
                connection=connection,
                passed=True,
                duration_seconds=time.monotonic() - start,
            )
        finally:
            scenario_id_var.reset(token)

    def run(self, table: Iterable[ConnectionDetails]) -> RunReport:
        report = RunReport()
        for connection in table:
            for name in self.scenario_names:
                report.results.append(self.run_scenario(name, connection))
        logger.info(report.summary())
        return report

    @staticmethod
    def _result(
        name: str,
        connection: ConnectionDetails,
        start: float,
        exc: BaseException,
        details: dict,
    ) -> ScenarioResult:
        return ScenarioResult(
            scenario=name,
            connection=connection,
            passed=False,
            duration_seconds=time.monotonic() - start,
            failure=str(exc),
            failure_type=type(exc).__name__,
            details=details,
        )
