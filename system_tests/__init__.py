"""
Functional Verification Tests.

This package runs the verification scenarios against a live server
platform, once per (endpoint, backend variant, identity) tuple in the
connection table.

Key Features:
- Platform and server health check before any test
- Data Engine scenarios verified through the repository services
- Subject Area definition category scenario
- JSON/markdown failure reports
"""
