"""Amount conversion helpers."""

from decimal import Decimal, DecimalException, InvalidOperation, Underflow, localcontext

from .constants import LAMPORTS_PER_SOL, MAX_LAMPORTS, SOL_DECIMALS
from .errors import InvalidAmountError

MAX_SOL = Decimal(MAX_LAMPORTS) / LAMPORTS_PER_SOL


def parse_sol_amount(text: str) -> int:
    """Convert a human-readable SOL amount to lamports.

    Args:
        text: Decimal SOL amount (e.g. "1.5").

    Returns:
        Amount in lamports (e.g. 1_500_000_000).

    Raises:
        InvalidAmountError: If the amount is not a finite positive number,
            has more than 9 fractional digits, or overflows u64.
    """
    raw = (text or "").strip()
    if not raw:
        raise InvalidAmountError(text, "amount cannot be empty")

    try:
        value = Decimal(raw)
    except InvalidOperation:
        raise InvalidAmountError(text, "not a number")

    if not value.is_finite():
        raise InvalidAmountError(text, "amount must be finite")
    if value <= 0:
        raise InvalidAmountError(text, "amount must be greater than zero")
    if value > MAX_SOL:
        raise InvalidAmountError(text, "amount exceeds the maximum lamport value")

    try:
        with localcontext() as ctx:
            ctx.prec = 100
            ctx.traps[Underflow] = True
            lamports = value * LAMPORTS_PER_SOL
    except DecimalException:
        raise InvalidAmountError(text, f"more than {SOL_DECIMALS} decimal places")
    if lamports != lamports.to_integral_value():
        raise InvalidAmountError(text, f"more than {SOL_DECIMALS} decimal places")

    return int(lamports)


def format_lamports(lamports: int) -> str:
    """Render lamports as a SOL decimal string without trailing zeros."""
    sol = Decimal(lamports) / LAMPORTS_PER_SOL
    text = format(sol, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
