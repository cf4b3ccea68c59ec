"""
Failure Report - Structured reports for failed verification scenarios.

Format designed to be:
1. Machine-parseable (JSON)
2. Self-contained: connection, failing expectation and expected/actual values
3. Readable as markdown for quick triage
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any


@dataclass
class FailureReport:
    """
    Structured report for a failed scenario.

    Holds everything needed to tell a repository inconsistency apart from a
    platform or client error without rerunning the test.
    """

    # Test identification
    test_id: str  # Full pytest node ID
    test_name: str  # Short name including parameters
    test_start: datetime
    test_end: datetime

    # Connection under test
    endpoint: str | None = None
    server_name: str | None = None
    user_id: str | None = None

    # Failure
    failure_type: str | None = None
    failure_message: str | None = None
    failure_details: dict[str, Any] = field(default_factory=dict)
    traceback: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "test_id": self.test_id,
            "test_name": self.test_name,
            "test_start": self.test_start.isoformat(),
            "test_end": self.test_end.isoformat(),
            "duration_seconds": (self.test_end - self.test_start).total_seconds(),
            "summary": self._generate_summary(),
            "connection": {
                "endpoint": self.endpoint,
                "server": self.server_name,
                "user": self.user_id,
            } if self.server_name else None,
            "failure": {
                "type": self.failure_type,
                "message": self.failure_message,
                "details": self.failure_details,
            },
            "traceback": self.traceback,
        }

    def to_json(self) -> str:
        """Serialize to JSON for file output."""
        return json.dumps(self.to_dict(), indent=2, default=str)

    def save(self, directory: Path | str = "test-results/fvt-reports") -> Path:
        """Save report to a JSON file and return the path."""
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)

        safe_name = (
            self.test_name.replace("/", "_").replace("::", "_").replace("[", "_").replace("]", "")
        )
        timestamp = self.test_start.strftime("%Y%m%d_%H%M%S")
        filepath = directory / f"{safe_name}_{timestamp}.json"
        filepath.write_text(self.to_json())

        return filepath

    def _generate_summary(self) -> str:
        """Generate a one-line summary for quick triage."""
        parts = []

        if self.server_name:
            parts.append(f"Server: {self.server_name}")

        if self.failure_type:
            parts.append(self.failure_type)

        if self.failure_message:
            parts.append(self.failure_message[:120])

        return " | ".join(parts) if parts else "Unknown failure"

    def to_markdown(self) -> str:
        """Generate markdown report for human review."""
        duration = (self.test_end - self.test_start).total_seconds()

        md = f"""# Verification Failure Report

## Test: `{self.test_name}`

**ID:** `{self.test_id}`
**Duration:** {duration:.2f}s
**Summary:** {self._generate_summary()}

---
"""

        if self.server_name:
            md += (
                f"\n## Connection\n\n"
                f"- Endpoint: `{self.endpoint}`\n"
                f"- Server: `{self.server_name}`\n"
                f"- User: `{self.user_id}`\n"
            )

        if self.failure_message:
            md += f"\n## {self.failure_type or 'Failure'}\n\n```\n{self.failure_message}\n```\n"

        if self.failure_details:
            md += f"\n## Details\n\n```json\n{json.dumps(self.failure_details, indent=2, default=str)}\n```\n"

        if self.traceback:
            md += f"\n## Traceback\n\n```\n{self.traceback}\n```\n"

        return md
