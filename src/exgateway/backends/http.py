"""
Blocking HTTP client for backend node query APIs.
"""

from __future__ import annotations

from typing import Any

import httpx
from loguru import logger

from exgateway.errors import BackendError, BackendUnreachableError, MalformedResponseError

# Timeout for node API calls (seconds)
DEFAULT_REQUEST_TIMEOUT = 30.0


class NodeClient:
    """
    Issues GET requests against a node at host:port and decodes JSON.

    One request per call. Retries, if wanted, belong to the caller.
    """

    def __init__(
        self,
        node_addr: str,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ):
        self.node_addr = node_addr
        self.client = httpx.Client(
            base_url=f"http://{node_addr}", timeout=timeout, transport=transport
        )

    def get(self, path: str, params: dict[str, str] | None = None) -> httpx.Response:
        """
        Make a GET request to the node.

        Raises:
            BackendUnreachableError: On connection, DNS or timeout errors
            BackendError: On a non-success status, with the body as message
        """
        try:
            response = self.client.get(path, params=params)
        except httpx.TransportError as e:
            logger.error(f"Node request failed: {path} - {type(e).__name__}: {e}")
            raise BackendUnreachableError(f"Backend node {self.node_addr} unreachable") from e

        if not response.is_success:
            body = response.text
            logger.error(f"Node returned {response.status_code} for {path}: {body}")
            raise BackendError(body, status_code=response.status_code)

        return response

    def get_json(self, path: str, params: dict[str, str] | None = None) -> Any:
        response = self.get(path, params)
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Undecodable JSON from {path}: {e}")
            raise MalformedResponseError(f"Invalid JSON from backend at {path}: {e}") from e

    def close(self) -> None:
        self.client.close()
