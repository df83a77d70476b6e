"""
Exception hierarchy for the gateway.

Request handlers map InvalidArgumentError to a wrong-request code and every
other GatewayError to a generic failure code carrying str(error).
"""

from __future__ import annotations


class GatewayError(Exception):
    pass


class InvalidArgumentError(GatewayError):
    """Malformed hash, address, seed or amount, detected before any I/O."""


class InvalidAmountError(InvalidArgumentError):
    pass


class BackendUnreachableError(GatewayError):
    """Transport-level failure talking to a backend node."""


class MalformedResponseError(GatewayError):
    """Backend returned a body that could not be decoded or converted."""


class BackendError(GatewayError):
    """Backend answered with a non-success status. The body is the message."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class KeyDerivationError(GatewayError):
    pass


class UnknownCoinError(GatewayError):
    pass
