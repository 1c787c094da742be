"""Number and currency rendering for the narrative layer.

The numeric core never formats; everything locale-dependent goes through
``CurrencyFormatter`` so it can be swapped per deployment.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal

# wide enough for every finite double at any displayed precision
_EXACT = Context(prec=400)


def format_fixed(value: float, places: int) -> str:
    """Fixed-point string, rounding ties away from zero on the exact binary value.

    Non-finite values render as ``Infinity`` / ``-Infinity`` / ``NaN``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(abs(value)).quantize(
        quantum, rounding=ROUND_HALF_UP, context=_EXACT
    )
    sign = "-" if value < 0 else ""
    return f"{sign}{rounded:f}"


def format_plain_number(value: float) -> str:
    """Shortest form of a number: ``10`` for 10.0, ``7.5`` for 7.5."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class CurrencyFormatter:
    """Whole-unit currency rendering with grouped thousands."""

    symbol: str = "$"
    group_separator: str = ","
    symbol_first: bool = True
    symbol_spacing: str = ""

    def format(self, amount: float) -> str:
        # -0.0 keeps its sign, like Intl.NumberFormat
        negative = amount < 0 or (amount == 0 and math.copysign(1.0, amount) < 0)
        if math.isnan(amount):
            digits = "NaN"
        elif math.isinf(amount):
            digits = "∞"
        else:
            whole = Decimal(abs(amount)).quantize(
                Decimal(1), rounding=ROUND_HALF_UP, context=_EXACT
            )
            digits = f"{int(whole):,}".replace(",", self.group_separator)

        if self.symbol_first:
            body = f"{self.symbol}{self.symbol_spacing}{digits}"
        else:
            body = f"{digits}{self.symbol_spacing}{self.symbol}"
        return f"-{body}" if negative else body

    @classmethod
    def for_locale(cls, locale: str) -> CurrencyFormatter:
        """Preset formatter for a locale tag such as ``en-US``."""
        key = locale.replace("_", "-")
        preset = _LOCALE_PRESETS.get(key)
        if preset is None:
            raise ValueError(
                f"Unsupported locale '{locale}'. "
                f"Expected one of: {sorted(_LOCALE_PRESETS)}"
            )
        return preset


_LOCALE_PRESETS: dict[str, CurrencyFormatter] = {
    "en-US": CurrencyFormatter(),
    "en-GB": CurrencyFormatter(symbol="£"),
    "de-DE": CurrencyFormatter(
        symbol="€", group_separator=".", symbol_first=False, symbol_spacing="\u00a0"
    ),
    "fr-FR": CurrencyFormatter(
        symbol="€", group_separator="\u202f", symbol_first=False, symbol_spacing="\u00a0"
    ),
    "ja-JP": CurrencyFormatter(symbol="￥"),
}

DEFAULT_FORMATTER = _LOCALE_PRESETS["en-US"]
