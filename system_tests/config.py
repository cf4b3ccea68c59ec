"""
System Test Configuration.

Controls the platform under test, the backend variants and how strictly an
unreachable platform is treated. Platform, servers, user and report
directory come from the harness settings, so ``.env`` applies to the live
tests exactly as it does to ``main.py``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from metadata_fvt.connection import ConnectionDetails, build_connection_table
from metadata_fvt.core.config import settings


@dataclass
class SystemTestConfig:
    """Configuration for system tests."""

    platform_url: str = field(default_factory=lambda: settings.platform_url)
    servers: list[str] = field(default_factory=lambda: settings.server_names)
    user_id: str = field(default_factory=lambda: settings.user_id)

    # Strictness: fail (instead of skip) when the platform is not reachable
    strict_mode: bool = False

    # TLS and timeouts (seconds)
    verify_ssl: bool = field(default_factory=lambda: settings.verify_ssl)
    platform_timeout: float = 10.0
    platform_startup_timeout: float = 30.0

    # Failure reports
    report_dir: str = field(default_factory=lambda: settings.report_dir)

    @classmethod
    def from_env(cls) -> "SystemTestConfig":
        """Load config from the harness settings plus the system-test-only variables."""
        return cls(
            platform_url=settings.platform_url,
            servers=settings.server_names,
            user_id=settings.user_id,
            strict_mode=os.getenv("FVT_STRICT", "0") == "1",
            verify_ssl=settings.verify_ssl,
            platform_startup_timeout=float(os.getenv("FVT_PLATFORM_STARTUP_TIMEOUT", "30")),
            report_dir=settings.report_dir,
        )

    def connection_table(self) -> list[ConnectionDetails]:
        """One connection per configured server."""
        return build_connection_table(self.platform_url, self.user_id, self.servers)


# Global default config instance
_config: SystemTestConfig | None = None


def get_config() -> SystemTestConfig:
    """Get or create the global config instance."""
    global _config
    if _config is None:
        _config = SystemTestConfig.from_env()
    return _config
