"""
Request handlers for the exchange's UTXO, output and address services.

Each handler binds a JSON request, resolves the coin backend through the
Exchange and returns either a response model or an ErrorResponse. Transport
framing is left to whatever server embeds these handlers.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from loguru import logger
from pydantic import BaseModel, Field, ValidationError

from exgateway.backends.base import Output
from exgateway.errors import GatewayError, InvalidArgumentError
from exgateway.exchange import Exchange

Payload = str | bytes | dict[str, Any]

# Upper bound on addresses derived per request
MAX_ADDRESS_COUNT = 1000


class ErrorCode(str, Enum):
    WRONG_REQUEST = "wrong_request"
    SERVER_ERROR = "server_error"


class ErrorResponse(BaseModel):
    code: ErrorCode
    message: str = ""


class GetUtxoRequest(BaseModel):
    coin_type: str
    addresses: list[str] = Field(default_factory=list)


class UtxoMessage(BaseModel):
    hash: str
    src_tx: str
    address: str
    coins: int
    hours: int


class GetUtxoResponse(BaseModel):
    coin_type: str
    utxos: list[UtxoMessage] = Field(default_factory=list)


class GetOutputRequest(BaseModel):
    coin_type: str
    hash: str


class GetOutputResponse(BaseModel):
    coin_type: str
    output: Output


class CreateAddressesRequest(BaseModel):
    coin_type: str
    seed: str = Field(min_length=1)
    count: int = Field(default=1, ge=1, le=MAX_ADDRESS_COUNT)


class AddressMessage(BaseModel):
    address: str
    public: str
    secret: str = ""


class CreateAddressesResponse(BaseModel):
    coin_type: str
    seed_digest: str
    addresses: list[AddressMessage]


def _bind(model: type[BaseModel], payload: Payload) -> Any:
    if isinstance(payload, str | bytes):
        return model.model_validate_json(payload)
    return model.model_validate(payload)


def _error_response(error: Exception) -> ErrorResponse:
    logger.error(str(error))
    if isinstance(error, ValidationError | InvalidArgumentError):
        return ErrorResponse(code=ErrorCode.WRONG_REQUEST, message=str(error))
    return ErrorResponse(code=ErrorCode.SERVER_ERROR, message=str(error))


def get_utxos(exchange: Exchange, payload: Payload) -> GetUtxoResponse | ErrorResponse:
    """Get unspent outputs of the requested addresses."""
    try:
        req: GetUtxoRequest = _bind(GetUtxoRequest, payload)
        coin = exchange.get_coin(req.coin_type)
        utxos = coin.get_utxos(req.addresses)
    except (ValidationError, GatewayError) as e:
        return _error_response(e)

    return GetUtxoResponse(
        coin_type=req.coin_type,
        utxos=[UtxoMessage(**u.to_dict()) for u in utxos],
    )


def get_output(exchange: Exchange, payload: Payload) -> GetOutputResponse | ErrorResponse:
    """Get a single output by its hash."""
    try:
        req: GetOutputRequest = _bind(GetOutputRequest, payload)
        coin = exchange.get_coin(req.coin_type)
        output = coin.get_output(req.hash)
    except (ValidationError, GatewayError) as e:
        return _error_response(e)

    return GetOutputResponse(coin_type=req.coin_type, output=output)


def create_addresses(
    exchange: Exchange, payload: Payload
) -> CreateAddressesResponse | ErrorResponse:
    """Derive a batch of addresses from a seed."""
    try:
        req: CreateAddressesRequest = _bind(CreateAddressesRequest, payload)
        coin = exchange.get_coin(req.coin_type)
        seed_digest, entries = coin.generate_addresses(req.seed.encode("utf-8"), req.count)
    except (ValidationError, GatewayError) as e:
        return _error_response(e)

    return CreateAddressesResponse(
        coin_type=req.coin_type,
        seed_digest=seed_digest,
        addresses=[
            AddressMessage(address=e.address, public=e.public, secret=e.secret) for e in entries
        ],
    )
