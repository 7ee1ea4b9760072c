"""Shared fixtures and network stubs for deposit PDA tests."""

import json
from types import SimpleNamespace

import pytest
from solders.hash import Hash  # type: ignore
from solders.keypair import Keypair  # type: ignore
from solders.pubkey import Pubkey  # type: ignore
from solders.signature import Signature  # type: ignore

from dz_validator_pda.errors import NetworkError
from dz_validator_pda.liveness import LivenessOracle
from dz_validator_pda.transfer import TransferSubmitter

VALIDATOR_ID = "FjYEr2UCeFzNfAKiFrbhG34Zv8LxbmfHYAFhAfc7SLQL"
OTHER_VALIDATOR_ID = "11111111111111111111111111111112"


class StubOracle(LivenessOracle):
    """Oracle answering from a fixed gossip set, or failing like a dead registry."""

    def __init__(self, active: set[Pubkey] | None = None, error: Exception | None = None):
        super().__init__("http://registry.invalid", 1.0)
        self._active = active or set()
        self._error = error
        self.calls = 0

    async def fetch_active_identities(self) -> set[Pubkey]:
        self.calls += 1
        if self._error is not None:
            raise self._error
        return set(self._active)


class StubSubmitter(TransferSubmitter):
    """Records funding requests instead of sending them."""

    def __init__(self, signature: str = "5sigStub", error: Exception | None = None):
        super().__init__("http://rpc.invalid", 1.0)
        self._signature = signature
        self._error = error
        self.requests = []

    async def submit(self, request) -> str:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        return self._signature


class FakeAsyncClient:
    """Stand-in for solana.rpc.async_api.AsyncClient."""

    nodes: list[Pubkey] = []
    balance: int = 0
    error: Exception | None = None
    blockhash_error: Exception | None = None
    send_error: Exception | None = None
    sent: list[bytes] = []
    endpoints: list[str] = []

    def __init__(self, endpoint: str, timeout: float | None = None):
        self.endpoint = endpoint
        self.timeout = timeout
        FakeAsyncClient.endpoints.append(endpoint)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False

    def _maybe_fail(self, error: Exception | None = None) -> None:
        error = error or FakeAsyncClient.error
        if error is not None:
            raise error

    async def get_cluster_nodes(self):
        self._maybe_fail()
        return SimpleNamespace(value=[SimpleNamespace(pubkey=p) for p in FakeAsyncClient.nodes])

    async def get_balance(self, address):
        self._maybe_fail()
        return SimpleNamespace(value=FakeAsyncClient.balance)

    async def get_latest_blockhash(self):
        self._maybe_fail(FakeAsyncClient.blockhash_error)
        return SimpleNamespace(value=SimpleNamespace(blockhash=Hash.default()))

    async def send_raw_transaction(self, raw: bytes):
        self._maybe_fail(FakeAsyncClient.send_error)
        FakeAsyncClient.sent.append(raw)
        return SimpleNamespace(value=Signature.default())


@pytest.fixture
def fake_client():
    FakeAsyncClient.nodes = []
    FakeAsyncClient.balance = 0
    FakeAsyncClient.error = None
    FakeAsyncClient.blockhash_error = None
    FakeAsyncClient.send_error = None
    FakeAsyncClient.sent = []
    FakeAsyncClient.endpoints = []
    return FakeAsyncClient


@pytest.fixture
def validator_id() -> Pubkey:
    return Pubkey.from_string(VALIDATOR_ID)


@pytest.fixture
def keypair() -> Keypair:
    return Keypair()


@pytest.fixture
def keypair_file(tmp_path, keypair):
    """Keypair written in the Solana CLI JSON array format."""
    path = tmp_path / "id.json"
    path.write_text(json.dumps(list(bytes(keypair))))
    return path


@pytest.fixture
def dead_registry_error() -> NetworkError:
    return NetworkError("Gossip registry http://registry.invalid unavailable: connection refused")
