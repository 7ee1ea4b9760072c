"""Gossip liveness checks for validator identities."""

import asyncio
import logging

import httpx
from solana.exceptions import SolanaRpcException
from solana.rpc.async_api import AsyncClient
from solana.rpc.core import RPCException
from solders.pubkey import Pubkey  # type: ignore

from .config import DepositConfig
from .errors import NetworkError
from .types import Liveness

logger = logging.getLogger(__name__)

# Failures that mean "could not ask", never "not a member"
TRANSPORT_ERRORS = (
    SolanaRpcException,
    RPCException,
    httpx.HTTPError,
    asyncio.TimeoutError,
    OSError,
)


class LivenessOracle:
    """Checks whether an identity is a current gossip participant.

    The registry is any Solana RPC endpoint serving ``getClusterNodes``.
    """

    def __init__(self, registry_url: str, timeout: float):
        self._registry_url = registry_url
        self._timeout = timeout

    @classmethod
    def from_config(cls, config: DepositConfig) -> "LivenessOracle":
        return cls(config.effective_registry_url, config.timeout_seconds)

    @property
    def registry_url(self) -> str:
        return self._registry_url

    async def fetch_active_identities(self) -> set[Pubkey]:
        """Return the identities currently reported by gossip.

        Raises:
            NetworkError: If the registry is unreachable, times out or errors.
        """
        try:
            async with AsyncClient(self._registry_url, timeout=self._timeout) as client:
                resp = await asyncio.wait_for(client.get_cluster_nodes(), self._timeout)
        except TRANSPORT_ERRORS as e:
            raise NetworkError(f"Gossip registry {self._registry_url} unavailable: {e}") from e

        return {node.pubkey for node in resp.value}

    async def is_active(self, identity: Pubkey) -> bool:
        """Return True if the identity appears in gossip.

        Raises:
            NetworkError: If the registry could not be queried.
        """
        active = await self.fetch_active_identities()
        return identity in active

    async def check(self, identity: Pubkey) -> Liveness:
        """Three-way liveness: ACTIVE, INACTIVE, or UNKNOWN on registry failure."""
        try:
            found = await self.is_active(identity)
        except NetworkError as e:
            logger.warning("Liveness of %s unknown: %s", identity, e)
            return Liveness.UNKNOWN

        return Liveness.ACTIVE if found else Liveness.INACTIVE
