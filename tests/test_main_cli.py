"""Tests for the command line entry point."""

from __future__ import annotations

import pytest

import main
from metadata_fvt.connection import BackendVariant
from metadata_fvt.runner import FVTRunner


@pytest.fixture
def cli(monkeypatch, fake_platform):
    """Run main() against the fake platform, recording logging setup and runners."""
    calls = {"logging": [], "runners": []}

    def fake_setup_logging(level=None, fmt=None):
        calls["logging"].append((level, fmt))

    def runner_factory(scenarios=None):
        runner = FVTRunner(scenarios=scenarios, transport=fake_platform.transport)
        calls["runners"].append(runner)
        return runner

    monkeypatch.setattr(main, "setup_logging", fake_setup_logging)
    monkeypatch.setattr(main, "FVTRunner", runner_factory)
    return calls


class TestParseArgs:
    def test_defaults(self):
        args = main.parse_args([])
        assert args.servers is None
        assert args.scenarios is None
        assert args.log_format is None

    def test_repeatable_options(self):
        args = main.parse_args(
            ["--server", "serverinmem", "--server", "servergraph", "--scenario", "upsert_database"]
        )
        assert args.servers == ["serverinmem", "servergraph"]
        assert args.scenarios == ["upsert_database"]

    def test_unknown_scenario_rejected(self):
        with pytest.raises(SystemExit):
            main.parse_args(["--scenario", "not-a-scenario"])


class TestMain:
    def test_success_exit_code(self, cli, fake_platform, capsys):
        code = main.main(
            ["--endpoint", "https://fake-platform:9443", "--server", "serverinmem", "--scenario", "upsert_database"]
        )

        assert code == 0
        assert "1/1 scenarios passed" in capsys.readouterr().out
        assert fake_platform.repository(BackendVariant.IN_MEMORY.value).count("Database") == 1

    def test_failure_exit_code(self, cli, fake_platform, capsys):
        fake_platform.inject_error("/databases", class_name="UserNotAuthorizedException", related_http_code=403)

        code = main.main(["--endpoint", "https://fake-platform:9443", "--scenario", "upsert_database"])

        assert code == 1
        out = capsys.readouterr().out
        assert "0/2 scenarios passed" in out
        assert "UserNotAuthorizedError" in out

    def test_logging_options_forwarded(self, cli):
        main.main(
            [
                "--endpoint",
                "https://fake-platform:9443",
                "--server",
                "servergraph",
                "--scenario",
                "register_external_tool",
                "--log-level",
                "DEBUG",
                "--log-format",
                "json",
            ]
        )
        assert cli["logging"] == [("DEBUG", "json")]
        assert cli["runners"][0].scenario_names == ["register_external_tool"]
