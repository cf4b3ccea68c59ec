"""Verification failures.

All failures subclass ``AssertionError`` so a test runner reports them as
failed expectations, not as errors in the harness itself.
"""

from __future__ import annotations

from typing import Any


class VerificationFailure(AssertionError):
    """An expectation about the repository contents did not hold."""

    def __init__(self, message: str, **details: Any):
        self.message = message
        self.details = details
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"failure": type(self).__name__, "message": self.message, "details": self.details}


class EntityNotFoundFailure(VerificationFailure):
    """No entity matched when at least one was expected."""


class CardinalityFailure(VerificationFailure):
    """A lookup expected to match exactly one entity matched several."""


class PropertyMismatchFailure(VerificationFailure):
    """A persisted property differs from the submitted value."""


class LineageMismatchFailure(VerificationFailure):
    """An attribute's lineage neighbours differ from its place in the chain."""
