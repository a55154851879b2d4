"""Polymarket market-data client — REST API.

Two read operations are consumed: the list of active, non-closed markets
and the recent 1-minute candles of one market. Responses come in several
shapes depending on the deployment:

- bare list of market dicts (gamma style, offset pagination)
- {"data": [...], "next_cursor": "..."} (CLOB style, cursor pagination)
- {"markets": [...]}

Requests are signed when a RequestSigner is supplied.
"""

from __future__ import annotations

import json
from typing import Any
from urllib.parse import quote

import httpx

from breakwatch.exchange.signing import RequestSigner
from breakwatch.models import Candle, coerce_float

_END_CURSOR = "LTE="


class PolymarketClient:
    """Async client for the Polymarket market-data API."""

    def __init__(
        self,
        base_url: str = "https://clob.polymarket.com",
        signer: RequestSigner | None = None,
        *,
        markets_path: str = "/data",
        candles_path: str = "/data/{market_id}/candles",
        timeout_s: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.signer = signer
        self.markets_path = markets_path
        self.candles_path = candles_path
        self.timeout_s = timeout_s
        self._transport = transport
        self._http: httpx.AsyncClient | None = None

    async def _get_http(self) -> httpx.AsyncClient:
        if self._http is None or self._http.is_closed:
            self._http = httpx.AsyncClient(timeout=self.timeout_s, transport=self._transport)
        return self._http

    async def close(self) -> None:
        if self._http and not self._http.is_closed:
            await self._http.aclose()

    async def _get_json(self, path: str, params: dict[str, Any]) -> Any:
        http = await self._get_http()
        request = http.build_request("GET", f"{self.base_url}{path}", params=params)
        if self.signer is not None:
            # Sign exactly what goes on the wire: path plus encoded query.
            signed_path = request.url.raw_path.decode("ascii")
            request.headers.update(self.signer.headers("GET", signed_path))
        resp = await http.send(request)
        resp.raise_for_status()
        return resp.json()

    async def get_markets(self, limit: int = 200) -> list[dict]:
        """Fetch up to *limit* active, non-closed markets.

        Follows CLOB cursors or gamma offsets until *limit* markets are
        collected or the upstream runs out.
        """
        all_markets: list[dict] = []
        offset = 0
        next_cursor: str | None = None

        while len(all_markets) < limit:
            page_size = limit - len(all_markets)
            params: dict[str, Any] = {"limit": page_size, "active": "true", "closed": "false"}

            if next_cursor is not None:
                params["next_cursor"] = next_cursor
            elif offset > 0:
                params["offset"] = offset

            body = await self._get_json(self.markets_path, params)

            if isinstance(body, dict) and ("data" in body or "markets" in body):
                page = body.get("data") or body.get("markets") or []
                next_cursor = body.get("next_cursor") or None
                if not page:
                    break
                all_markets.extend(page)
                if next_cursor is None or next_cursor == _END_CURSOR:
                    break
            elif isinstance(body, list):
                if not body:
                    break
                all_markets.extend(body)
                if len(body) < page_size:
                    break
                offset += len(body)
            else:
                break

        return all_markets[:limit]

    async def get_candles(
        self,
        market_id: str,
        resolution: str = "1m",
        limit: int = 60,
    ) -> list[Candle]:
        """Fetch the most recent candles for one market, oldest first."""
        path = self.candles_path.format(market_id=quote(market_id, safe=""))
        body = await self._get_json(path, {"resolution": resolution, "limit": limit})

        if isinstance(body, dict):
            rows = body.get("candles") or body.get("data") or []
        elif isinstance(body, list):
            rows = body
        else:
            rows = []
        if not isinstance(rows, list):
            rows = []
        return [Candle.from_raw(row) for row in rows if row is not None]

    @staticmethod
    def normalize_market(market: dict) -> dict:
        """Normalize a market dict to consistent field names.

        The CLOB API uses snake_case (condition_id) and carries prices on a
        ``tokens`` list, while other endpoints use camelCase and
        ``outcomePrices``. Prices are returned parsed, YES first.
        """
        market_id = (
            market.get("marketId")
            or market.get("id")
            or market.get("conditionId")
            or market.get("condition_id")
            or ""
        )
        prices = PolymarketClient.parse_outcome_prices(market.get("outcomePrices"))
        if not prices and isinstance(market.get("tokens"), list):
            prices = [
                coerce_float(token.get("price"))
                for token in market["tokens"]
                if isinstance(token, dict)
            ]
        return {
            "id": str(market_id),
            "question": str(market.get("question") or market.get("title") or ""),
            "outcomePrices": prices,
            "volume24hr": coerce_float(market.get("volume24hr") or market.get("volume")),
        }

    @staticmethod
    def parse_outcome_prices(raw: Any) -> list[float]:
        """Parse outcomePrices which may be a JSON string or a list.

        Malformed input yields an empty list; malformed entries become 0.
        """
        if isinstance(raw, str) and raw.strip():
            try:
                raw = json.loads(raw)
            except json.JSONDecodeError:
                return []
        if isinstance(raw, list):
            return [coerce_float(x) for x in raw]
        return []
