"""Constants for DoubleZero validator deposit accounts."""

from solders.pubkey import Pubkey  # type: ignore

# Revenue distribution program that owns the deposit PDAs
REVENUE_DISTRIBUTION_PROGRAM_ID = Pubkey.from_string("dzrevZC94tBLwuHw1dyynZxaXTWyp7yocsinyEVPtt4")

# Seed label mixed into every validator deposit PDA
SEED_SOLANA_VALIDATOR_DEPOSIT = b"solana_validator_deposit"

# PDA derivation limits (mirrors the Solana runtime)
MAX_SEED_LEN = 32
MAX_SEEDS = 16
MAX_BUMP = 255

# Identity encoding
PUBKEY_LENGTH = 32
BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"

# Endpoints
DEFAULT_RPC_URL = "https://api.mainnet-beta.solana.com"
DEVNET_RPC_URL = "https://api.devnet.solana.com"

# Default timeout for registry queries, balance reads and submissions (in seconds)
DEFAULT_TIMEOUT_SECONDS = 30.0

# Units
LAMPORTS_PER_SOL = 1_000_000_000
SOL_DECIMALS = 9
MAX_LAMPORTS = 2**64 - 1

# Environment variables
ENV_RPC_URL = "DZ_PDA_RPC_URL"
ENV_REGISTRY_URL = "DZ_PDA_REGISTRY_URL"
ENV_TIMEOUT_SECONDS = "DZ_PDA_TIMEOUT_SECONDS"
ENV_PROGRAM_ID = "DZ_PDA_PROGRAM_ID"

# Funding result codes
ERR_INVALID_IDENTITY = "invalid_identity"
ERR_INVALID_AMOUNT = "invalid_amount"
ERR_CREDENTIAL_LOAD_FAILURE = "credential_load_failure"
ERR_CONFIGURATION = "configuration_error"
ERR_FUNDING_CANCELLED_INACTIVE_VALIDATOR = "funding_cancelled_inactive_validator"
ERR_TRANSACTION_FAILURE = "transaction_failure"
