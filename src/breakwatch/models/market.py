"""Market data models — candles and point-in-time market snapshots."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict

_CANDLE_FIELDS = ("timestamp", "open", "high", "low", "close", "volume")
_CANDLE_SHORT_KEYS = ("t", "o", "h", "l", "c", "v")


def coerce_float(raw: Any) -> float:
    """Parse *raw* as a float, returning 0.0 for anything non-finite or unparsable."""
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return 0.0
    return value if math.isfinite(value) else 0.0


class Candle(BaseModel):
    """One 1-minute OHLCV bucket for a market's YES outcome."""

    model_config = ConfigDict(frozen=True)

    timestamp: float
    open: float
    high: float
    low: float
    close: float
    volume: float

    @classmethod
    def from_raw(cls, raw: Sequence[Any] | Mapping[str, Any]) -> Candle:
        """Build a candle from an upstream row.

        Accepts ``[t, o, h, l, c, v]`` arrays or mappings keyed by either the
        full field names or their one-letter abbreviations. Missing or
        malformed fields become 0.
        """
        if isinstance(raw, Mapping):
            values = [
                raw.get(name, raw.get(short))
                for name, short in zip(_CANDLE_FIELDS, _CANDLE_SHORT_KEYS)
            ]
        elif isinstance(raw, Sequence) and not isinstance(raw, str):
            values = list(raw[:6]) + [None] * (6 - len(raw[:6]))
        else:
            values = [None] * 6
        return cls(**{name: coerce_float(v) for name, v in zip(_CANDLE_FIELDS, values)})


class MarketSnapshot(BaseModel):
    """A point-in-time read of a binary market's quoted prices and rolling volume."""

    id: str
    question: str
    yes_price: float
    no_price: float
    volume_24h: float = 0.0

    @property
    def spread(self) -> float:
        return abs(self.yes_price - self.no_price)

    @property
    def analyzable(self) -> bool:
        return self.yes_price > 0 and self.no_price > 0
