"""Submission of SOL transfers to deposit PDAs."""

import asyncio
import logging

import httpx
from solana.exceptions import SolanaRpcException
from solana.rpc.async_api import AsyncClient
from solana.rpc.core import RPCException
from solders.message import Message  # type: ignore
from solders.system_program import TransferParams, transfer  # type: ignore
from solders.transaction import Transaction  # type: ignore

from .config import DepositConfig
from .errors import NetworkError, TransactionError
from .types import FundingRequest

logger = logging.getLogger(__name__)

TRANSPORT_ERRORS = (SolanaRpcException, httpx.HTTPError, asyncio.TimeoutError, OSError)


class TransferSubmitter:
    """Builds, signs and sends a single System Program transfer."""

    def __init__(self, rpc_url: str, timeout: float):
        self._rpc_url = rpc_url
        self._timeout = timeout

    @classmethod
    def from_config(cls, config: DepositConfig) -> "TransferSubmitter":
        return cls(config.rpc_url, config.timeout_seconds)

    @property
    def rpc_url(self) -> str:
        return self._rpc_url

    @staticmethod
    def build_transaction(request: FundingRequest, recent_blockhash) -> Transaction:
        """Build and sign the transfer transaction for a funding request."""
        payer = request.signer.pubkey
        transfer_ix = transfer(
            TransferParams(
                from_pubkey=payer,
                to_pubkey=request.deposit_address,
                lamports=request.lamports,
            )
        )
        message = Message.new_with_blockhash([transfer_ix], payer, recent_blockhash)
        return Transaction([request.signer.keypair], message, recent_blockhash)

    async def submit(self, request: FundingRequest) -> str:
        """Submit the transfer and return its signature.

        Raises:
            TransactionError: If the cluster rejects the transaction.
            NetworkError: If the endpoint is unreachable or times out.
        """
        request.validate()

        async with AsyncClient(self._rpc_url, timeout=self._timeout) as client:
            try:
                blockhash_resp = await asyncio.wait_for(
                    client.get_latest_blockhash(), self._timeout
                )
            except (RPCException, *TRANSPORT_ERRORS) as e:
                raise NetworkError(f"Failed to fetch blockhash from {self._rpc_url}: {e}") from e

            tx = self.build_transaction(request, blockhash_resp.value.blockhash)
            try:
                result = await asyncio.wait_for(
                    client.send_raw_transaction(bytes(tx)), self._timeout
                )
            except RPCException as e:
                raise TransactionError(f"Transaction rejected: {e}") from e
            except TRANSPORT_ERRORS as e:
                raise NetworkError(f"RPC {self._rpc_url} unavailable: {e}") from e

        tx_hash = str(result.value)
        logger.info(
            "Submitted transfer of %d lamports to %s: %s",
            request.lamports,
            request.deposit_address,
            tx_hash,
        )
        return tx_hash
