"""Derived models — breaking metrics, signals, analyzed markets and the report."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BreakingMetrics(BaseModel):
    """Volume and price statistics over the tail of a candle series."""

    current_volume: float
    average_volume: float
    volume_ratio: float
    price_change: float


class SignalCategory(str, Enum):
    BUY_YES = "BUY_YES"
    AVOID_SELL = "AVOID_SELL"
    UPTREND = "UPTREND"
    DOWNTREND = "DOWNTREND"
    WAIT = "WAIT"


class Signal(BaseModel):
    """A trading-direction hint with a human-readable rationale.

    ``style`` is a presentation hint for the dashboard (a CSS class) and
    serializes as ``class``.
    """

    model_config = ConfigDict(populate_by_name=True)

    category: SignalCategory
    label: str
    style: str = Field(alias="class")
    reason: str


class AnalyzedMarket(BaseModel):
    """One dashboard row: snapshot, metrics, signal and breaking flag."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    question: str
    yes: float
    no: float
    spread: float
    volume_24h: float = Field(alias="volume24h")
    volume_now: float
    avg_volume: float
    volume_ratio: str
    price_change: str
    signal: Signal
    is_breaking: bool
    last_update: datetime
    url: str


class Report(BaseModel):
    """The full output artifact of one scan."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    generated_at: datetime
    source: Literal["live", "example"]
    total_markets: int
    breaking_count: int
    markets: list[AnalyzedMarket] = Field(default_factory=list)

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
