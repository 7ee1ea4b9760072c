"""Funding signer backed by a Solana keypair."""

import json
from pathlib import Path

import base58  # type: ignore[import-untyped]
from solders.keypair import Keypair  # type: ignore
from solders.pubkey import Pubkey  # type: ignore

from .errors import CredentialError

KEYPAIR_LENGTH = 64


class KeypairSigner:
    """Signs funding transfers with a local keypair."""

    def __init__(self, keypair: Keypair):
        self._keypair = keypair

    @property
    def address(self) -> str:
        """Base58 public key of the funding account."""
        return str(self._keypair.pubkey())

    @property
    def pubkey(self) -> Pubkey:
        return self._keypair.pubkey()

    @property
    def keypair(self) -> Keypair:
        return self._keypair

    @classmethod
    def from_base58(cls, base58_key: str) -> "KeypairSigner":
        try:
            key_bytes = base58.b58decode(base58_key.strip())
        except ValueError as e:
            raise CredentialError(f"Invalid base58 keypair: {e}") from e
        return cls.from_bytes(key_bytes)

    @classmethod
    def from_bytes(cls, key_bytes: bytes) -> "KeypairSigner":
        if len(key_bytes) != KEYPAIR_LENGTH:
            raise CredentialError(
                f"Invalid keypair length: {len(key_bytes)} bytes, expected {KEYPAIR_LENGTH}"
            )
        try:
            return cls(Keypair.from_bytes(key_bytes))
        except ValueError as e:
            raise CredentialError(f"Invalid keypair bytes: {e}") from e

    @classmethod
    def from_file(cls, path: str | Path) -> "KeypairSigner":
        """Load a keypair file.

        Accepts the Solana CLI format (a JSON array of 64 byte values) or a
        single base58 encoded secret key.

        Raises:
            CredentialError: If the file cannot be read or decoded.
        """
        path = Path(path).expanduser()
        try:
            content = path.read_text().strip()
        except (OSError, UnicodeDecodeError) as e:
            raise CredentialError(f"Failed to read keypair file {path}: {e}") from e

        if not content:
            raise CredentialError(f"Keypair file is empty: {path}")

        if content.startswith("["):
            try:
                values = json.loads(content)
                key_bytes = bytes(values)
            except (json.JSONDecodeError, TypeError, ValueError) as e:
                raise CredentialError(f"Malformed keypair file {path}: {e}") from e
            return cls.from_bytes(key_bytes)

        return cls.from_base58(content)
