import json

import pytest
from eth_abi import encode as abi_encode

from chain.client import ChainClient
from chain.errors import ContractCallReverted
from helpers import addr
from pricing.errors import ReserveUnavailable
from pricing.pool import Reserves
from pricing.reserves import ChainReserveProvider, StaticReserveProvider

GET_RESERVES = bytes.fromhex("0902f1ac")


class _Client:
    def __init__(self, result=b"", error=None):
        self.result = result
        self.error = error
        self.requests = []

    def call(self, request, block="latest"):
        self.requests.append((request, block))
        if self.error is not None:
            raise self.error
        return self.result


class _Response:
    def __init__(self, payload, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def json(self):
        return self._payload


def _encoded(reserve0: int, reserve1: int) -> bytes:
    return abi_encode(["uint112", "uint112", "uint32"], [reserve0, reserve1, 1700000000])


def test_chain_provider_decodes_get_reserves():
    client = _Client(result=_encoded(5 * 10**18, 7 * 10**18))
    provider = ChainReserveProvider(client)

    reserves = provider.get_reserves(addr(0xA1))

    assert reserves == Reserves(reserve_in=5 * 10**18, reserve_out=7 * 10**18)
    request, block = client.requests[0]
    assert request.to == addr(0xA1)
    assert request.data == GET_RESERVES
    assert block == "latest"


def test_chain_provider_wraps_revert():
    client = _Client(error=ContractCallReverted("execution reverted", code=3))
    with pytest.raises(ReserveUnavailable, match="execution reverted") as exc:
        ChainReserveProvider(client).get_reserves(addr(0xA1))
    assert exc.value.pair_address == addr(0xA1).checksum


def test_chain_provider_rejects_empty_result():
    with pytest.raises(ReserveUnavailable, match="empty call result"):
        ChainReserveProvider(_Client(result=b"")).get_reserves(addr(0xA1))


def test_chain_provider_rejects_short_result():
    with pytest.raises(ReserveUnavailable, match="decode failed"):
        ChainReserveProvider(_Client(result=b"\x00" * 10)).get_reserves(addr(0xA1))


def test_chain_provider_over_rpc(monkeypatch):
    def fake_post(*args, **kwargs):
        params = kwargs["json"]["params"]
        assert params[0]["data"] == "0x0902f1ac"
        return _Response({"result": "0x" + _encoded(1000, 1100).hex()})

    client = ChainClient(["https://rpc.example"])
    monkeypatch.setattr(client._session, "post", fake_post)

    reserves = ChainReserveProvider(client).get_reserves(addr(0xA1))
    assert reserves.as_tuple() == (1000, 1100)


def test_static_provider_lookup_is_case_insensitive():
    provider = StaticReserveProvider({addr(0xABC).checksum.upper(): (10, 20)})
    assert provider.get_reserves(addr(0xABC)) == Reserves(10, 20)


def test_static_provider_missing_pair():
    with pytest.raises(ReserveUnavailable, match="not in snapshot"):
        StaticReserveProvider({}).get_reserves(addr(1))


def test_static_provider_from_json(tmp_path):
    path = tmp_path / "reserves.json"
    path.write_text(
        json.dumps(
            {
                addr(1).lower: ["1000000000000000000000", 42],
                addr(2).lower: ["0x10", "0x20"],
            }
        ),
        encoding="utf-8",
    )

    provider = StaticReserveProvider.from_json(path)

    assert provider.get_reserves(addr(1)).as_tuple() == (10**21, 42)
    assert provider.get_reserves(addr(2)).as_tuple() == (16, 32)


def test_static_provider_from_json_rejects_bad_shape(tmp_path):
    path = tmp_path / "reserves.json"
    path.write_text(json.dumps({addr(1).lower: [1, 2, 3]}), encoding="utf-8")
    with pytest.raises(ValueError, match=r"\[reserve0, reserve1\]"):
        StaticReserveProvider.from_json(path)


def test_reserves_reject_negative():
    with pytest.raises(ValueError, match="non-negative"):
        Reserves(-1, 10)
    assert not Reserves(0, 10).has_liquidity


def test_reserves_reject_bool():
    with pytest.raises(TypeError, match="reserves must be int"):
        Reserves(True, 10)
    with pytest.raises(TypeError, match="reserves must be int"):
        Reserves(10, False)
