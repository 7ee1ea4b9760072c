"""Balance reads for deposit PDAs."""

import asyncio

from solana.rpc.async_api import AsyncClient
from solders.pubkey import Pubkey  # type: ignore

from .config import DepositConfig
from .errors import NetworkError
from .liveness import TRANSPORT_ERRORS
from .types import BalanceReport
from .utils import format_lamports


class BalanceReader:
    """Reads account balances in lamports."""

    def __init__(self, rpc_url: str, timeout: float):
        self._rpc_url = rpc_url
        self._timeout = timeout

    @classmethod
    def from_config(cls, config: DepositConfig) -> "BalanceReader":
        return cls(config.rpc_url, config.timeout_seconds)

    async def get_balance(self, address: Pubkey, rpc_url: str | None = None) -> int:
        """Get the balance of an account.

        Args:
            address: Account to read.
            rpc_url: Optional endpoint overriding the configured one.

        Returns:
            Balance in lamports.

        Raises:
            NetworkError: If the endpoint fails or times out.
        """
        url = rpc_url or self._rpc_url
        try:
            async with AsyncClient(url, timeout=self._timeout) as client:
                resp = await asyncio.wait_for(client.get_balance(address), self._timeout)
        except TRANSPORT_ERRORS as e:
            raise NetworkError(f"Failed to get balance: {e}") from e
        return resp.value

    async def report(self, address: Pubkey, rpc_url: str | None = None) -> BalanceReport:
        lamports = await self.get_balance(address, rpc_url)
        return BalanceReport(address=address, lamports=lamports, sol=format_lamports(lamports))
