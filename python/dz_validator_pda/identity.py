"""Parsing of validator identity strings."""

import base58  # type: ignore[import-untyped]
from solders.pubkey import Pubkey  # type: ignore

from .constants import BASE58_ALPHABET, PUBKEY_LENGTH
from .errors import EmptyInputError, InvalidCharacterError, WrongLengthError

_ALPHABET = frozenset(BASE58_ALPHABET)


def parse_identity(text: str) -> Pubkey:
    """Parse a base58 validator identity into a Pubkey.

    Surrounding whitespace is trimmed before decoding; whitespace inside the
    string is rejected like any other out-of-alphabet character.

    Args:
        text: Base58 encoded 32-byte public key.

    Returns:
        The parsed identity.

    Raises:
        EmptyInputError: If the input is empty or whitespace only.
        InvalidCharacterError: If a character is outside the base58 alphabet.
        WrongLengthError: If the decoded value is not 32 bytes.
    """
    trimmed = (text or "").strip()
    if not trimmed:
        raise EmptyInputError()

    for char in trimmed:
        if char not in _ALPHABET:
            raise InvalidCharacterError(char)

    raw = base58.b58decode(trimmed)
    if len(raw) != PUBKEY_LENGTH:
        raise WrongLengthError(len(raw), PUBKEY_LENGTH)

    return Pubkey(raw)


def encode_identity(identity: Pubkey) -> str:
    """Encode an identity back to its base58 text form."""
    return base58.b58encode(bytes(identity)).decode()

