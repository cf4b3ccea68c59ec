"""
System test reporters package.
"""

from system_tests.reporters.failure_report import FailureReport

__all__ = [
    "FailureReport",
]
