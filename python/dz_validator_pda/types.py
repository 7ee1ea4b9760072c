"""Types for validator deposit funding."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from solders.pubkey import Pubkey  # type: ignore

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
    DepositError,
    InputValidationError,
    SafetyCancellation,
    TransactionError,
)
from .signers import KeypairSigner

_REASON_ERRORS: dict[str, type[DepositError]] = {
    ERR_INVALID_IDENTITY: InputValidationError,
    ERR_INVALID_AMOUNT: InputValidationError,
    ERR_CREDENTIAL_LOAD_FAILURE: CredentialError,
    ERR_CONFIGURATION: ConfigurationError,
    ERR_FUNDING_CANCELLED_INACTIVE_VALIDATOR: SafetyCancellation,
    ERR_TRANSACTION_FAILURE: TransactionError,
}


class Liveness(str, Enum):
    """Outcome of a gossip membership check."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    UNKNOWN = "unknown"  # registry unreachable


@dataclass(frozen=True)
class FundingRequest:
    """A single transfer of lamports from a signer to a deposit PDA."""

    signer: KeypairSigner
    deposit_address: Pubkey
    lamports: int

    def validate(self) -> None:
        if self.lamports <= 0:
            raise ValueError(f"lamports must be positive, got {self.lamports}")


@dataclass
class FundingResult:
    """Outcome of a funding attempt.

    Attributes:
        success: Whether a transfer was submitted.
        transaction: Transaction signature, empty unless submitted.
        reason: Result code from constants.ERR_*, None on success.
        detail: Human-readable explanation.
        deposit_address: Derived PDA, if derivation was reached.
        lamports: Parsed amount, if parsing was reached.
        liveness: Gossip check outcome, if the check was reached.
    """

    success: bool
    transaction: str = ""
    reason: str | None = None
    detail: str = ""
    deposit_address: Pubkey | None = None
    lamports: int | None = None
    liveness: Liveness | None = None

    @property
    def cancelled(self) -> bool:
        return self.reason == ERR_FUNDING_CANCELLED_INACTIVE_VALIDATOR

    def raise_for_status(self) -> None:
        """Raise the typed error matching ``reason``; no-op on success."""
        if self.success:
            return
        error_cls = _REASON_ERRORS.get(self.reason or "", DepositError)
        raise error_cls(self.detail or self.reason or "funding failed")

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "success": self.success,
            "transaction": self.transaction,
        }
        if self.deposit_address is not None:
            data["depositAddress"] = str(self.deposit_address)
        if self.lamports is not None:
            data["lamports"] = self.lamports
        if self.liveness is not None:
            data["liveness"] = self.liveness.value
        if self.reason:
            data["extra"] = {"error": self.reason, "detail": self.detail}
        return data


@dataclass(frozen=True)
class BalanceReport:
    """Balance of a deposit PDA."""

    address: Pubkey
    lamports: int
    sol: str
