# src/coingecko_client/clients/coingecko_client.py

# --- Built Ins ---
import asyncio
from typing import Any, Dict, List, Optional, Self
from urllib.parse import quote, urlencode

# --- Installed ---
import aiohttp
import orjson
from loguru import logger as log
from pydantic import TypeAdapter
from pydantic import ValidationError as SchemaValidationError

# --- Local Imports ---
from ..config.models import CoinGeckoSettings
from ..core.enums import PRO_API_KEY_HEADER, ApiTier, OrderType
from ..core.exceptions import (
    APIError,
    DecodeError,
    NotFoundError,
    TransportError,
    ValidationError,
)
from ..core.models import (
    AssetPlatform,
    CoinsID,
    CoinsIDHistory,
    CoinsIDMarketChart,
    CoinsIDTickers,
    CoinsListItem,
    CoinsMarketItem,
    EventCountryItem,
    EventsCountries,
    EventsTypes,
    ExchangeRatesItem,
    ExchangeRatesResponse,
    Global,
    GlobalResponse,
    Ping,
    SimpleSinglePrice,
)
from ..utils.formatter import bool_to_str, enum_value, int_to_str, join_csv

SimplePrices = Dict[str, Optional[Dict[str, Optional[float]]]]

_MAX_PER_PAGE = 250

_SIMPLE_PRICE = TypeAdapter(SimplePrices)
_STRING_LIST = TypeAdapter(List[str])
_COINS_LIST = TypeAdapter(List[CoinsListItem])
_COINS_MARKET = TypeAdapter(List[CoinsMarketItem])
_ASSET_PLATFORMS = TypeAdapter(List[AssetPlatform])


def _require(**values: Any) -> None:
    """Raises ValidationError naming the first empty required parameter."""
    for name, value in values.items():
        if not value:
            raise ValidationError(f"{name} is required")


class CoinGeckoClient:
    """
    Async client for the CoinGecko v3 REST API.
    Every public coroutine maps to exactly one GET endpoint. The client holds no
    mutable request state, so one instance can be shared by concurrent tasks.
    Pass an existing aiohttp.ClientSession to reuse its connection pool, or let
    the client open its own on connect() or on the first request. An owned
    session is released by close() or by leaving `async with`.
    """

    def __init__(
        self,
        http_session: Optional[aiohttp.ClientSession] = None,
        api_key: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        request_timeout_s: float = 30.0,
    ):
        if request_timeout_s <= 0:
            raise ValidationError("request_timeout_s must be positive")
        self._api_key = api_key or None
        self._base_url = (base_url or ApiTier.for_api_key(self._api_key).base_url).rstrip("/")
        self._session = http_session
        self._owns_session = http_session is None
        self._timeout = aiohttp.ClientTimeout(total=request_timeout_s)

    @classmethod
    def with_url(
        cls,
        url: str,
        http_session: Optional[aiohttp.ClientSession] = None,
        api_key: Optional[str] = None,
    ) -> Self:
        """Builds a client against an explicit host, e.g. a mock server."""
        return cls(http_session, api_key, base_url=url)

    @classmethod
    def from_settings(
        cls,
        settings: CoinGeckoSettings,
        http_session: Optional[aiohttp.ClientSession] = None,
    ) -> Self:
        return cls(
            http_session,
            settings.api_key_value,
            base_url=settings.resolved_base_url,
            request_timeout_s=settings.request_timeout_s,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def has_api_key(self) -> bool:
        return self._api_key is not None

    # --- SESSION LIFECYCLE ---

    async def connect(self):
        """Opens the owned session. A no-op when the session was injected."""
        if not self._owns_session:
            return
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                json_serialize=lambda data: orjson.dumps(data).decode()
            )
            log.info(f"Aiohttp session established for CoinGecko API at {self._base_url}.")

    async def close(self):
        """Closes the owned session. An injected session is left to its owner."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
            log.info("Aiohttp session for CoinGecko API closed.")

    async def __aenter__(self) -> Self:
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    # --- SINGLE INTERNAL REQUEST METHOD ---

    def _build_url(self, path: str, params: Optional[Dict[str, Any]] = None) -> str:
        url = f"{self._base_url}{path}"
        if params:
            url = f"{url}?{urlencode(params)}"
        return url

    async def _perform_get(self, path: str, params: Optional[Dict[str, Any]] = None) -> bytes:
        """
        Issues one GET and returns the raw body of a 200 response.
        Transport failures become TransportError and any other status becomes
        APIError. Caller cancellation is propagated untouched.
        """
        if self._owns_session:
            await self.connect()
        elif self._session.closed:
            raise TransportError("Injected session is closed.")

        url = self._build_url(path, params)
        headers = {PRO_API_KEY_HEADER: self._api_key} if self._api_key else {}

        log.debug(f"[API CALL] GET {path}")
        try:
            async with self._session.get(url, headers=headers, timeout=self._timeout) as response:
                status = response.status
                body = await response.read()
        except aiohttp.ClientError as e:
            raise TransportError(f"GET {path} failed: {e}") from e
        except asyncio.TimeoutError as e:
            raise TransportError(f"GET {path} timed out after {self._timeout.total}s") from e

        if status != 200:
            if body:
                message = body.decode("utf-8", errors="replace")
            else:
                message = f'{{"status": {{"error_code": {status}}}}}'
            raise APIError(status, message)
        return body

    @staticmethod
    def _decode(payload: bytes, schema: Any) -> Any:
        """Parses the body with orjson and validates it against a model class or TypeAdapter."""
        try:
            data = orjson.loads(payload)
            if isinstance(schema, TypeAdapter):
                return schema.validate_python(data)
            return schema.model_validate(data)
        except (orjson.JSONDecodeError, SchemaValidationError) as e:
            raise DecodeError(f"Could not decode response: {e}") from e

    async def _get(self, path: str, schema: Any, params: Optional[Dict[str, Any]] = None) -> Any:
        payload = await self._perform_get(path, params)
        return self._decode(payload, schema)

    @staticmethod
    def _coin_path(coin_id: str, suffix: str = "") -> str:
        return f"/coins/{quote(coin_id, safe='')}{suffix}"

    # --- PUBLIC API METHODS ---

    async def ping(self) -> Ping:
        """/ping"""
        return await self._get("/ping", Ping)

    async def simple_single_price(self, coin_id: str, vs_currency: str) -> SimpleSinglePrice:
        """
        Looks up one (coin id, currency) cell through /simple/price.
        Both inputs are lower-cased before the request. Raises NotFoundError when
        the API returns no value for the cell.
        """
        _require(id=coin_id, vs_currency=vs_currency)
        coin_id = coin_id.lower()
        vs_currency = vs_currency.lower()

        prices = await self.simple_price([coin_id], [vs_currency])
        cell = prices.get(coin_id) or {}
        market_price = cell.get(vs_currency)
        if market_price is None:
            raise NotFoundError(f"No price for id '{coin_id}' in currency '{vs_currency}'.")
        return SimpleSinglePrice(id=coin_id, currency=vs_currency, market_price=market_price)

    async def simple_price(self, ids: List[str], vs_currencies: List[str]) -> SimplePrices:
        """/simple/price for several ids and currencies at once."""
        _require(ids=ids, vs_currencies=vs_currencies)
        params = {
            "ids": join_csv(ids),
            "vs_currencies": join_csv(vs_currencies),
        }
        return await self._get("/simple/price", _SIMPLE_PRICE, params)

    async def simple_supported_vs_currencies(self) -> List[str]:
        """/simple/supported_vs_currencies"""
        return await self._get("/simple/supported_vs_currencies", _STRING_LIST)

    async def coins_list(self, include_platform: bool = False) -> List[CoinsListItem]:
        """/coins/list"""
        params = {"include_platform": bool_to_str(include_platform)}
        return await self._get("/coins/list", _COINS_LIST, params)

    async def coins_market(
        self,
        vs_currency: str,
        ids: Optional[List[str]] = None,
        order: str = "",
        per_page: int = 0,
        page: int = 0,
        sparkline: bool = False,
        price_change_percentage: Optional[List[str]] = None,
    ) -> List[CoinsMarketItem]:
        """
        /coins/markets snapshot.
        per_page and page are only sent, together, when per_page is in (0, 250].
        """
        _require(vs_currency=vs_currency)
        params: Dict[str, Any] = {
            "vs_currency": enum_value(vs_currency),
            "order": enum_value(order) or OrderType.MARKET_CAP_DESC.value,
        }
        if ids:
            params["ids"] = join_csv(ids)
        if 0 < per_page <= _MAX_PER_PAGE:
            params["per_page"] = int_to_str(per_page)
            params["page"] = int_to_str(page)
        params["sparkline"] = bool_to_str(sparkline)
        if price_change_percentage:
            params["price_change_percentage"] = join_csv(price_change_percentage)

        return await self._get("/coins/markets", _COINS_MARKET, params)

    async def coins_id(
        self,
        coin_id: str,
        localization: bool = True,
        tickers: bool = True,
        market_data: bool = True,
        community_data: bool = True,
        developer_data: bool = True,
        sparkline: bool = False,
    ) -> CoinsID:
        """/coins/{id} with every detail flag sent explicitly."""
        _require(id=coin_id)
        params = {
            "localization": bool_to_str(localization),
            "tickers": bool_to_str(tickers),
            "market_data": bool_to_str(market_data),
            "community_data": bool_to_str(community_data),
            "developer_data": bool_to_str(developer_data),
            "sparkline": bool_to_str(sparkline),
        }
        return await self._get(self._coin_path(coin_id), CoinsID, params)

    async def coins_id_tickers(self, coin_id: str, page: int = 0) -> CoinsIDTickers:
        """/coins/{id}/tickers"""
        _require(id=coin_id)
        params = {}
        if page > 0:
            params["page"] = int_to_str(page)
        return await self._get(self._coin_path(coin_id, "/tickers"), CoinsIDTickers, params)

    async def coins_id_history(
        self, coin_id: str, date: str, localization: bool = False
    ) -> CoinsIDHistory:
        """/coins/{id}/history, date formatted dd-mm-yyyy."""
        _require(id=coin_id, date=date)
        params = {"date": date, "localization": bool_to_str(localization)}
        return await self._get(self._coin_path(coin_id, "/history"), CoinsIDHistory, params)

    async def coins_id_market_chart(
        self, coin_id: str, vs_currency: str, days: str
    ) -> CoinsIDMarketChart:
        """/coins/{id}/market_chart, days being a day count or 'max'."""
        _require(id=coin_id, vs_currency=vs_currency, days=days)
        params = {"vs_currency": enum_value(vs_currency), "days": days}
        return await self._get(
            self._coin_path(coin_id, "/market_chart"), CoinsIDMarketChart, params
        )

    async def events_countries(self) -> List[EventCountryItem]:
        """/events/countries, unwrapped from its 'data' envelope."""
        response = await self._get("/events/countries", EventsCountries)
        return response.data

    async def events_types(self) -> EventsTypes:
        """/events/types"""
        return await self._get("/events/types", EventsTypes)

    async def exchange_rates(self) -> Dict[str, ExchangeRatesItem]:
        """/exchange_rates, unwrapped from its 'rates' envelope."""
        response = await self._get("/exchange_rates", ExchangeRatesResponse)
        return response.rates

    async def asset_platforms(self) -> List[AssetPlatform]:
        """/asset_platforms"""
        return await self._get("/asset_platforms", _ASSET_PLATFORMS)

    async def global_data(self) -> Global:
        """/global, unwrapped from its 'data' envelope."""
        response = await self._get("/global", GlobalResponse)
        return response.data
