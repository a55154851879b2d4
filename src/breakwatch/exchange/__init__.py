"""Market-data API client and request signing."""

from breakwatch.exchange.polymarket import PolymarketClient
from breakwatch.exchange.signing import RequestSigner

__all__ = ["PolymarketClient", "RequestSigner"]
