# tiliches/ui/formatting.py

"""Text formatting helpers shared by the product widgets."""

import textwrap
from decimal import ROUND_HALF_UP, Decimal, localcontext

from tiliches.config.settings import Settings

ELLIPSIS = "…"
_CENTS = Decimal("0.01")


def format_price(price: float, symbol: str = Settings.CURRENCY_SYMBOL) -> str:
    """Format *price* as ``$`` plus exactly two decimals.

    Rounds half-up on the number's shortest decimal repr, so ``19.995``
    becomes ``$20.00`` even though the binary float sits just below it.
    The context precision grows with the magnitude so huge prices still
    quantize to cents.
    """
    amount = Decimal(str(price))
    with localcontext() as ctx:
        if amount.is_finite():
            ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        amount = amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
    return f"{symbol}{amount}"


def format_category(category: str) -> str:
    """Category label as shown on a card: ``electronics`` -> ``ELECTRONICS``."""
    return category.upper()


def truncate_title(
    title: str,
    width: int = Settings.TITLE_WRAP_WIDTH,
    max_lines: int = Settings.TITLE_MAX_LINES,
) -> str:
    """Wrap *title* to *width* columns, ellipsizing past *max_lines*."""
    lines = textwrap.wrap(title, width=width)
    if len(lines) <= max_lines:
        return "\n".join(lines)

    kept = lines[:max_lines]
    last = kept[-1]
    if len(last) >= width:
        last = last[: width - 1].rstrip()
    kept[-1] = last + ELLIPSIS
    return "\n".join(kept)


def format_rating(rate: float, count: int) -> str:
    """Rating line for the detail screen: ``★ 3.9 (120 reviews)``."""
    noun = "review" if count == 1 else "reviews"
    return f"★ {rate:.1f} ({count} {noun})"
