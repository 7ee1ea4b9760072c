"""Error types for validator deposit operations."""


class DepositError(Exception):
    """Base class for all deposit account errors."""


class InputValidationError(DepositError, ValueError):
    """User-supplied input (identity or amount) is invalid."""


class EmptyInputError(InputValidationError):
    def __init__(self, field: str = "Validator address"):
        self.field = field
        super().__init__(f"{field} parameter cannot be empty")


class InvalidCharacterError(InputValidationError):
    def __init__(self, offending_char: str):
        self.offending_char = offending_char
        super().__init__(f"Invalid pubkey format: invalid character {offending_char!r}")


class WrongLengthError(InputValidationError):
    def __init__(self, actual_len: int, expected_len: int = 32):
        self.actual_len = actual_len
        self.expected_len = expected_len
        super().__init__(
            f"Invalid pubkey format: decoded to {actual_len} bytes, expected {expected_len}"
        )


class InvalidAmountError(InputValidationError):
    def __init__(self, amount: str, reason: str):
        self.amount = amount
        self.reason = reason
        super().__init__(f"Invalid amount {amount!r}: {reason}")


class ConfigurationError(DepositError):
    """A process-wide constant or setting is broken (e.g. bump search exhausted)."""


class CredentialError(DepositError):
    """The funding keypair could not be read or decoded."""


class NetworkError(DepositError):
    """An RPC or registry endpoint was unreachable or timed out."""


class SafetyCancellation(DepositError):
    """Funding was cancelled because the validator is not active in gossip."""


class TransactionError(DepositError):
    """The network rejected the transfer transaction."""
