"""Shared synchronous REST plumbing for the platform's service APIs."""

from __future__ import annotations

from typing import Any

import httpx

from metadata_fvt.core.config import settings
from metadata_fvt.core.exceptions import (
    ConnectorCheckedError,
    error_from_response,
    is_error_response,
)
from metadata_fvt.core.logging import get_logger


logger = get_logger("clients")


class PlatformClient:
    """Base for clients bound to one (platform, server, user) triple.

    Subclasses set ``service_path`` to the part of the URL after
    ``/servers/{server}/``. The client owns its ``httpx.Client`` unless one
    is passed in, and is a context manager.
    """

    service_path: str = ""

    def __init__(
        self,
        server_name: str,
        platform_url: str,
        user_id: str,
        http_client: httpx.Client | None = None,
    ):
        self.server_name = server_name
        self.platform_url = platform_url.rstrip("/")
        self.user_id = user_id
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(
            verify=settings.verify_ssl,
            timeout=settings.request_timeout,
        )

    @property
    def base_url(self) -> str:
        return (
            f"{self.platform_url}/servers/{self.server_name}/"
            f"{self.service_path}/users/{self.user_id}"
        )

    def close(self) -> None:
        if self._owns_client:
            self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _call(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Issue one request and return the decoded body, raising on failure."""
        url = f"{self.base_url}/{path.lstrip('/')}"
        logger.debug(f"{method} {url}")

        try:
            response = self._http.request(method, url, json=json, params=params)
        except httpx.RequestError as exc:
            logger.warning(f"Platform request failed: {exc}")
            raise ConnectorCheckedError(
                message=f"Platform unavailable at {self.platform_url}",
                details={"url": url},
            ) from exc

        try:
            body = response.json() if response.content else {}
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {"result": body}

        if is_error_response(body, response.status_code):
            error = error_from_response(body, response.status_code)
            logger.warning(
                f"{method} {path} failed: {error.error_code} "
                f"(HTTP {error.status_code}) {error.message}"
            )
            raise error

        return body

    def _post(self, path: str, body: Any = None, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return self._call("POST", path, json=body, params=params)

    def _get(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return self._call("GET", path, params=params)

    def _put(self, path: str, body: Any = None, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return self._call("PUT", path, json=body, params=params)

    def _delete(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return self._call("DELETE", path, params=params)
