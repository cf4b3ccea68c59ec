"""Functional verification harness for the Data Engine and Subject Area access services."""

__version__ = "1.0.0"
