"""DoubleZero validator deposit PDAs.

Derives the revenue distribution deposit PDA for a Solana validator
identity, reads its balance, and funds it once the validator is confirmed
live in gossip.

Example:
    ```python
    from dz_validator_pda import derive_deposit_address, parse_identity

    identity = parse_identity("FjYEr2UCeFzNfAKiFrbhG34Zv8LxbmfHYAFhAfc7SLQL")
    print(derive_deposit_address(identity))
    ```
"""

from .balance import BalanceReader
from .config import DepositConfig
from .constants import (
    DEFAULT_RPC_URL,
    LAMPORTS_PER_SOL,
    REVENUE_DISTRIBUTION_PROGRAM_ID,
    SEED_SOLANA_VALIDATOR_DEPOSIT,
)
from .errors import (
    ConfigurationError,
    CredentialError,
    DepositError,
    EmptyInputError,
    InputValidationError,
    InvalidAmountError,
    InvalidCharacterError,
    NetworkError,
    SafetyCancellation,
    TransactionError,
    WrongLengthError,
)
from .funding import FundingOrchestrator
from .identity import encode_identity, parse_identity
from .liveness import LivenessOracle
from .pda import DepositAddress, DepositAddressDeriver, derive_deposit_address
from .signers import KeypairSigner
from .transfer import TransferSubmitter
from .types import BalanceReport, FundingRequest, FundingResult, Liveness
from .utils import format_lamports, parse_sol_amount

__all__ = [
    # Constants
    "DEFAULT_RPC_URL",
    "LAMPORTS_PER_SOL",
    "REVENUE_DISTRIBUTION_PROGRAM_ID",
    "SEED_SOLANA_VALIDATOR_DEPOSIT",
    # Config
    "DepositConfig",
    # Identity
    "parse_identity",
    "encode_identity",
    # Derivation
    "DepositAddress",
    "DepositAddressDeriver",
    "derive_deposit_address",
    # Network
    "BalanceReader",
    "LivenessOracle",
    "TransferSubmitter",
    "KeypairSigner",
    # Funding
    "FundingOrchestrator",
    "FundingRequest",
    "FundingResult",
    "BalanceReport",
    "Liveness",
    "parse_sol_amount",
    "format_lamports",
    # Errors
    "DepositError",
    "InputValidationError",
    "EmptyInputError",
    "InvalidCharacterError",
    "WrongLengthError",
    "InvalidAmountError",
    "ConfigurationError",
    "CredentialError",
    "NetworkError",
    "SafetyCancellation",
    "TransactionError",
]
