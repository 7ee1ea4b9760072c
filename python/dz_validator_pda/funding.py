"""Liveness-gated funding of validator deposit PDAs.

The orchestrator runs a linear pipeline:

1. parse the validator identity
2. parse the SOL amount into lamports
3. load the funding keypair
4. derive the deposit PDA
5. check gossip liveness
6. submit the transfer

Only step 6 touches chain state. A validator confirmed absent from gossip
cancels the transfer; an unreachable registry only logs a warning.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from .config import DepositConfig
from .constants import (
    ERR_CONFIGURATION,
    ERR_CREDENTIAL_LOAD_FAILURE,
    ERR_FUNDING_CANCELLED_INACTIVE_VALIDATOR,
    ERR_INVALID_AMOUNT,
    ERR_INVALID_IDENTITY,
    ERR_TRANSACTION_FAILURE,
)
from .errors import (
    ConfigurationError,
    CredentialError,
    InputValidationError,
    NetworkError,
    TransactionError,
)
from .identity import parse_identity
from .liveness import LivenessOracle
from .pda import DepositAddressDeriver
from .signers import KeypairSigner
from .transfer import TransferSubmitter
from .types import FundingRequest, FundingResult, Liveness
from .utils import parse_sol_amount

logger = logging.getLogger(__name__)


class FundingOrchestrator:
    """Funds a validator deposit PDA if the validator is live in gossip."""

    def __init__(
        self,
        config: DepositConfig | None = None,
        oracle: LivenessOracle | None = None,
        submitter: TransferSubmitter | None = None,
        credential_loader: Callable[[str | Path], KeypairSigner] = KeypairSigner.from_file,
    ):
        self._config = config or DepositConfig()
        self._deriver = DepositAddressDeriver(self._config)
        self._oracle = oracle
        self._submitter = submitter
        self._load_credential = credential_loader

    def _oracle_for(self, registry_url: str | None) -> LivenessOracle:
        if self._oracle is not None and not registry_url:
            return self._oracle
        return LivenessOracle(
            registry_url or self._config.effective_registry_url,
            self._config.timeout_seconds,
        )

    def _submitter_for(self, rpc_url: str | None) -> TransferSubmitter:
        if self._submitter is not None and not rpc_url:
            return self._submitter
        return TransferSubmitter(rpc_url or self._config.rpc_url, self._config.timeout_seconds)

    async def fund(
        self,
        identity_text: str,
        credential_path: str | Path,
        amount_text: str,
        registry_url: str | None = None,
        rpc_url: str | None = None,
    ) -> FundingResult:
        """Fund the deposit PDA of a validator.

        Args:
            identity_text: Base58 validator identity.
            credential_path: Path to the funding keypair file.
            amount_text: Amount in SOL (e.g. "1.5").
            registry_url: Optional gossip registry endpoint override.
            rpc_url: Optional submission endpoint override.

        Returns:
            FundingResult. Errors are reported through ``reason`` and
            ``detail`` rather than raised.
        """
        # 1. Identity
        try:
            identity = parse_identity(identity_text)
        except InputValidationError as e:
            return _failed(ERR_INVALID_IDENTITY, str(e))

        # 2. Amount
        try:
            lamports = parse_sol_amount(amount_text)
        except InputValidationError as e:
            return _failed(ERR_INVALID_AMOUNT, str(e))

        # 3. Credential
        try:
            signer = self._load_credential(credential_path)
        except CredentialError as e:
            return _failed(ERR_CREDENTIAL_LOAD_FAILURE, str(e), lamports=lamports)

        # 4. Deposit PDA
        try:
            deposit = self._deriver.derive(identity)
        except ConfigurationError as e:
            return _failed(ERR_CONFIGURATION, str(e), lamports=lamports)
        logger.debug("Funding %s from %s", deposit.address, signer.address)

        # 5. Liveness gate
        liveness = await self._oracle_for(registry_url).check(identity)
        if liveness is Liveness.INACTIVE:
            logger.info("Validator %s not found in gossip, funding cancelled", identity)
            return _failed(
                ERR_FUNDING_CANCELLED_INACTIVE_VALIDATOR,
                f"Validator {identity} is not active in gossip; funding cancelled",
                deposit_address=deposit.address,
                lamports=lamports,
                liveness=liveness,
            )
        if liveness is Liveness.UNKNOWN:
            logger.warning("Proceeding with funding of %s without liveness confirmation", identity)

        # 6. Transfer
        request = FundingRequest(signer=signer, deposit_address=deposit.address, lamports=lamports)
        try:
            tx_hash = await self._submitter_for(rpc_url).submit(request)
        except (TransactionError, NetworkError) as e:
            return _failed(
                ERR_TRANSACTION_FAILURE,
                str(e),
                deposit_address=deposit.address,
                lamports=lamports,
                liveness=liveness,
            )

        return FundingResult(
            success=True,
            transaction=tx_hash,
            deposit_address=deposit.address,
            lamports=lamports,
            liveness=liveness,
        )


def _failed(reason: str, detail: str, **fields) -> FundingResult:
    return FundingResult(success=False, reason=reason, detail=detail, **fields)
