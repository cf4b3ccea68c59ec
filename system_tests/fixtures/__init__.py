"""
System test fixtures package.
"""

from system_tests.fixtures.platform_health import HealthCheckResult, PlatformHealthChecker

__all__ = [
    "HealthCheckResult",
    "PlatformHealthChecker",
]
