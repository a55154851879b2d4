"""Signal classifier — ordered decision list over YES price and price change.

Rules are evaluated top to bottom and the first match wins. The last rule
always matches, so every input yields exactly one signal.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from breakwatch.models import Signal, SignalCategory


@dataclass(frozen=True)
class SignalRule:
    category: SignalCategory
    label: str
    style: str
    matches: Callable[[float, float], bool]
    reason: Callable[[float, float], str]


SIGNAL_RULES: tuple[SignalRule, ...] = (
    SignalRule(
        category=SignalCategory.BUY_YES,
        label="BUY YES",
        style="bg-green-600",
        matches=lambda yes, change: yes < 0.40,
        reason=lambda yes, change: f"YES price undervalued ({yes:.2f})",
    ),
    SignalRule(
        category=SignalCategory.AVOID_SELL,
        label="SELL / AVOID",
        style="bg-red-600",
        matches=lambda yes, change: yes > 0.60,
        reason=lambda yes, change: f"YES price overvalued ({yes:.2f})",
    ),
    SignalRule(
        category=SignalCategory.UPTREND,
        label="UPTREND",
        style="bg-blue-600",
        matches=lambda yes, change: yes < 0.48 and change > 0.005,
        reason=lambda yes, change: f"YES rising ({change * 100:+.2f}%)",
    ),
    SignalRule(
        category=SignalCategory.DOWNTREND,
        label="DOWNTREND",
        style="bg-orange-600",
        matches=lambda yes, change: yes > 0.52 and change < -0.005,
        reason=lambda yes, change: f"YES falling ({change * 100:+.2f}%)",
    ),
    SignalRule(
        category=SignalCategory.WAIT,
        label="WAIT",
        style="bg-gray-600",
        matches=lambda yes, change: True,
        reason=lambda yes, change: "no clear signal",
    ),
)


def classify_signal(yes_price: float, price_change: float) -> Signal:
    """Return the signal of the first rule matching *yes_price* and *price_change*."""
    # The WAIT rule matches everything, so next() always finds a rule.
    rule = next(r for r in SIGNAL_RULES if r.matches(yes_price, price_change))
    return Signal(
        category=rule.category,
        label=rule.label,
        style=rule.style,
        reason=rule.reason(yes_price, price_change),
    )
