"""
Tests for the request handlers and their error mapping.
"""

import json

import httpx

from exgateway import api
from exgateway.api import (
    CreateAddressesResponse,
    ErrorCode,
    ErrorResponse,
    GetOutputResponse,
    GetUtxoResponse,
)
from exgateway.exchange import Exchange


class TestGetUtxos:
    def test_success(self, exchange, node_stub, sample_output_record):
        node_stub.handler = lambda request: httpx.Response(200, json=[sample_output_record])

        res = api.get_utxos(exchange, {"coin_type": "skycoin", "addresses": ["a", "b"]})
        assert isinstance(res, GetUtxoResponse)
        assert res.coin_type == "skycoin"
        assert len(res.utxos) == 1
        assert res.utxos[0].coins == 2_500_000
        assert res.utxos[0].hash == sample_output_record["hash"]

    def test_json_body(self, exchange, node_stub):
        body = json.dumps({"coin_type": "skycoin", "addresses": ["a"]})
        res = api.get_utxos(exchange, body)
        assert isinstance(res, GetUtxoResponse)
        assert res.utxos == []

    def test_no_addresses(self, exchange, node_stub):
        res = api.get_utxos(exchange, {"coin_type": "skycoin"})
        assert isinstance(res, GetUtxoResponse)
        assert res.utxos == []
        assert node_stub.requests == []

    def test_unbindable_request(self, exchange, node_stub):
        res = api.get_utxos(exchange, b"{not json")
        assert isinstance(res, ErrorResponse)
        assert res.code == ErrorCode.WRONG_REQUEST
        assert node_stub.requests == []

    def test_missing_coin_type(self, exchange):
        res = api.get_utxos(exchange, {"addresses": ["a"]})
        assert isinstance(res, ErrorResponse)
        assert res.code == ErrorCode.WRONG_REQUEST

    def test_unknown_coin(self, exchange):
        res = api.get_utxos(exchange, {"coin_type": "dogecoin", "addresses": ["a"]})
        assert isinstance(res, ErrorResponse)
        assert res.code == ErrorCode.SERVER_ERROR
        assert "dogecoin" in res.message

    def test_backend_unreachable(self, exchange, node_stub):
        def refuse(request):
            raise httpx.ConnectError("Connection refused", request=request)

        node_stub.handler = refuse

        res = api.get_utxos(exchange, {"coin_type": "skycoin", "addresses": ["a"]})
        assert isinstance(res, ErrorResponse)
        assert res.code == ErrorCode.SERVER_ERROR
        assert "unreachable" in res.message


class TestGetOutput:
    def test_success(self, exchange, node_stub, output_hash, sample_uxout):
        node_stub.handler = lambda request: httpx.Response(200, json=sample_uxout)

        res = api.get_output(exchange, {"coin_type": "skycoin", "hash": output_hash})
        assert isinstance(res, GetOutputResponse)
        assert res.output.uxid == output_hash
        assert res.output.coins == 2_500_000

    def test_invalid_hash_is_wrong_request(self, exchange, node_stub):
        res = api.get_output(exchange, {"coin_type": "skycoin", "hash": "xyz"})
        assert isinstance(res, ErrorResponse)
        assert res.code == ErrorCode.WRONG_REQUEST
        assert "invalid output hash" in res.message
        assert node_stub.requests == []

    def test_backend_message_preserved(self, exchange, node_stub, output_hash):
        node_stub.handler = lambda request: httpx.Response(500, text="node busy")

        res = api.get_output(exchange, {"coin_type": "skycoin", "hash": output_hash})
        assert isinstance(res, ErrorResponse)
        assert res.code == ErrorCode.SERVER_ERROR
        assert res.message == "node busy"

    def test_malformed_response(self, exchange, node_stub, output_hash):
        node_stub.handler = lambda request: httpx.Response(200, text="garbage")

        res = api.get_output(exchange, {"coin_type": "skycoin", "hash": output_hash})
        assert isinstance(res, ErrorResponse)
        assert res.code == ErrorCode.SERVER_ERROR
        assert "Invalid JSON" in res.message


class TestCreateAddresses:
    def test_success(self, exchange, node_stub):
        res = api.create_addresses(exchange, {"coin_type": "skycoin", "seed": "abc", "count": 3})
        assert isinstance(res, CreateAddressesResponse)
        assert len(res.addresses) == 3
        assert len(res.seed_digest) == 64
        assert all(a.secret for a in res.addresses)
        assert node_stub.requests == []

    def test_deterministic(self, exchange):
        payload = {"coin_type": "skycoin", "seed": "abc", "count": 2}
        assert api.create_addresses(exchange, payload) == api.create_addresses(exchange, payload)

    def test_hidden_secret_keys(self, node_stub):
        from exgateway.backends.skycoin import SkycoinBackend
        from exgateway.wallet.keys import AddressDeriver, DeriverConfig

        exchange = Exchange()
        exchange.register(
            SkycoinBackend(
                deriver=AddressDeriver(DeriverConfig(hide_secret_key=True)),
                transport=node_stub.transport(),
            )
        )

        res = api.create_addresses(exchange, {"coin_type": "skycoin", "seed": "abc", "count": 2})
        assert isinstance(res, CreateAddressesResponse)
        assert all(a.secret == "" for a in res.addresses)
        exchange.close()

    def test_empty_seed(self, exchange):
        res = api.create_addresses(exchange, {"coin_type": "skycoin", "seed": "", "count": 2})
        assert isinstance(res, ErrorResponse)
        assert res.code == ErrorCode.WRONG_REQUEST

    def test_zero_count(self, exchange):
        res = api.create_addresses(exchange, {"coin_type": "skycoin", "seed": "abc", "count": 0})
        assert isinstance(res, ErrorResponse)
        assert res.code == ErrorCode.WRONG_REQUEST

    def test_count_above_limit(self, exchange, node_stub):
        res = api.create_addresses(
            exchange,
            {"coin_type": "skycoin", "seed": "abc", "count": api.MAX_ADDRESS_COUNT + 1},
        )
        assert isinstance(res, ErrorResponse)
        assert res.code == ErrorCode.WRONG_REQUEST
        assert node_stub.requests == []
