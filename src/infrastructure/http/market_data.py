"""httpx implementation of MarketDataRepository.

Talks to the dashboard's data endpoints:

    GET {base}/vix?period1=YYYY-MM-DD&period2=YYYY-MM-DD&source=yahoo
    GET {base}/spx?period1=…&period2=…&source=…
    GET {base}/futures?source=…

Each returns {"data": [...], "source": "..."} on success and
{"error": "..."} with a non-2xx status on failure.
"""

from __future__ import annotations

import asyncio
import logging
import re
from datetime import date
from typing import Any

import httpx
from pydantic import ValidationError

from src.domain.errors import FetchFailed, FetchTimeout
from src.domain.models.enums import DataSource
from src.domain.models.market_data import DailyPoint, FuturesQuote
from src.domain.repositories.market_data import MarketDataRepository
from src.infrastructure.config import Settings

logger = logging.getLogger(__name__)

_TENOR_PATTERN = re.compile(r"^(Spot|M[1-7])$")


class HttpMarketDataRepository(MarketDataRepository):
    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

    @classmethod
    def from_settings(cls, settings: Settings) -> HttpMarketDataRepository:
        return cls(settings.api_base_url, timeout=settings.request_timeout_seconds)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> HttpMarketDataRepository:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # ------------------------------------------------------------------ #
    # MarketDataRepository                                                 #
    # ------------------------------------------------------------------ #

    async def get_vix_history(
        self,
        start: date,
        end: date,
        source: DataSource = DataSource.YAHOO,
    ) -> list[DailyPoint]:
        payload = await self._get_json("/vix", self._history_params(start, end, source))
        return self._to_daily_points(payload, f"{self._base_url}/vix")

    async def get_spx_history(
        self,
        start: date,
        end: date,
        source: DataSource = DataSource.YAHOO,
    ) -> list[DailyPoint]:
        payload = await self._get_json("/spx", self._history_params(start, end, source))
        return self._to_daily_points(payload, f"{self._base_url}/spx")

    async def get_futures_term_structure(
        self,
        source: DataSource = DataSource.YAHOO,
    ) -> list[FuturesQuote]:
        payload = await self._get_json("/futures", {"source": DataSource(source).value})
        return self._to_futures_quotes(payload, f"{self._base_url}/futures")

    # ------------------------------------------------------------------ #
    # Transport                                                            #
    # ------------------------------------------------------------------ #

    @staticmethod
    def _history_params(start: date, end: date, source: DataSource) -> dict[str, str]:
        return {
            "period1": start.isoformat(),
            "period2": end.isoformat(),
            "source": DataSource(source).value,
        }

    async def _get_json(self, path: str, params: dict[str, str]) -> Any:
        """GET and decode JSON; every failure mode maps to FetchTimeout / FetchFailed.

        The request as a whole (connect, headers and body) is bounded by
        self._timeout.
        """
        url = f"{self._base_url}{path}"
        try:
            response = await asyncio.wait_for(
                self._client.get(url, params=params), timeout=self._timeout
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            raise FetchTimeout(url, self._timeout) from exc
        except httpx.HTTPError as exc:
            raise FetchFailed(url, f"network error: {exc}") from exc

        if not response.is_success:
            raise FetchFailed(
                url,
                f"API Error: {response.status_code} {self._error_message(response)}".rstrip(),
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as exc:
            raise FetchFailed(url, "response body is not valid JSON") from exc

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return ""
        if isinstance(body, dict) and isinstance(body.get("error"), str):
            return body["error"]
        return ""

    # ------------------------------------------------------------------ #
    # Payload mapping                                                      #
    # ------------------------------------------------------------------ #

    @staticmethod
    def _data_rows(payload: Any, url: str) -> list[dict[str, Any]]:
        if not isinstance(payload, dict) or not isinstance(payload.get("data"), list):
            raise FetchFailed(url, "payload has no 'data' array")
        rows = payload["data"]
        if not all(isinstance(row, dict) for row in rows):
            raise FetchFailed(url, "'data' array contains non-object entries")
        return rows

    @staticmethod
    def _to_daily_points(payload: Any, url: str) -> list[DailyPoint]:
        """Validate rows into DailyPoint, dropping sessions without a positive close."""
        rows = HttpMarketDataRepository._data_rows(payload, url)
        usable = [
            row
            for row in rows
            if isinstance(row.get("close"), (int, float)) and row["close"] > 0
        ]
        if len(usable) < len(rows):
            logger.debug("Dropped %d rows without a positive close from %s", len(rows) - len(usable), url)
        try:
            points = [DailyPoint.model_validate(row) for row in usable]
        except ValidationError as exc:
            raise FetchFailed(url, f"malformed daily row: {exc.errors()[0]['msg']}") from exc
        return sorted(points, key=lambda p: p.point_date)

    @staticmethod
    def _to_futures_quotes(payload: Any, url: str) -> list[FuturesQuote]:
        """Validate quotes, keeping only the Spot..M7 tenors in endpoint order."""
        rows = HttpMarketDataRepository._data_rows(payload, url)
        known = [row for row in rows if _TENOR_PATTERN.match(str(row.get("month", "")))]
        if len(known) < len(rows):
            logger.warning(
                "Ignoring %d futures quotes outside Spot..M7 from %s", len(rows) - len(known), url
            )
        try:
            return [FuturesQuote.model_validate(row) for row in known]
        except ValidationError as exc:
            raise FetchFailed(url, f"malformed futures row: {exc.errors()[0]['msg']}") from exc
