"""
Human-readable rendering of polynomial coefficients.
"""

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Context, Decimal
import math

from pypolyreg.core.compute.tolerances import EQUATION_DECIMALS, EQUATION_THRESHOLD

EMPTY_EQUATION = 'y = 0'
ERROR_EQUATION = 'Error'


def _term(power: int, magnitude: str) -> str:
    if power == 0:
        return magnitude
    if power == 1:
        return f"{magnitude}x"
    return f"{magnitude}x^{power}"


def _fixed(value: float, decimals: int) -> str:
    """Fixed-point text with ties rounded away from zero."""
    if not math.isfinite(value):
        return str(value)
    exact = Decimal(value)
    context = Context(prec=max(28, exact.adjusted() + decimals + 2))
    return f"{exact.quantize(Decimal(1).scaleb(-decimals), ROUND_HALF_UP, context):f}"


def format_equation(
    coefficients: Sequence[float],
    *,
    threshold: float = EQUATION_THRESHOLD,
    decimals: int = EQUATION_DECIMALS,
) -> str:
    """
    Render coefficients (ascending powers) as an equation string.

    Terms with |c| < threshold are dropped. Magnitudes are rounded half
    up on their exact binary value, so 0.125 shows as 0.13. The first
    visible term gets a "- " prefix only when negative; every later term
    gets "+ " or "- ".

    Example:
        >>> format_equation([2.0, -3.0, 0.0005])
        '2.00 - 3.00x'
        >>> format_equation([0.0, 1.5, -0.25])
        '1.50x - 0.25x^2'
        >>> format_equation([])
        'y = 0'
    """
    terms: list[str] = []
    for power, c in enumerate(coefficients):
        c = float(c)
        if abs(c) < threshold:
            continue
        magnitude = _fixed(abs(c), decimals)
        if c < 0:
            sign = '- '
        else:
            sign = '+ ' if terms else ''
        terms.append(sign + _term(power, magnitude))

    if not terms:
        return EMPTY_EQUATION
    return ' '.join(terms)
