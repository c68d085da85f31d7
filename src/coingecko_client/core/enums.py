# src/coingecko_client/core/enums.py

from enum import Enum

PUBLIC_BASE_URL = "https://api.coingecko.com/api/v3"
PRO_BASE_URL = "https://pro-api.coingecko.com/api/v3"
PRO_API_KEY_HEADER = "X-Cg-Pro-Api-Key"


class ApiTier(str, Enum):
    """The two hosted CoinGecko API tiers, keyed to their base URLs."""

    PUBLIC = "public"
    PRO = "pro"

    @property
    def base_url(self) -> str:
        if self is ApiTier.PRO:
            return PRO_BASE_URL
        return PUBLIC_BASE_URL

    @classmethod
    def for_api_key(cls, api_key: str | None) -> "ApiTier":
        return cls.PRO if api_key else cls.PUBLIC


class OrderType(str, Enum):
    """Sort orders accepted by /coins/markets."""

    MARKET_CAP_DESC = "market_cap_desc"
    MARKET_CAP_ASC = "market_cap_asc"
    GECKO_DESC = "gecko_desc"
    GECKO_ASC = "gecko_asc"
    VOLUME_ASC = "volume_asc"
    VOLUME_DESC = "volume_desc"
    ID_ASC = "id_asc"
    ID_DESC = "id_desc"


class PriceChangePercentage(str, Enum):
    """Windows for the price_change_percentage query of /coins/markets."""

    PCP_1H = "1h"
    PCP_24H = "24h"
    PCP_7D = "7d"
    PCP_14D = "14d"
    PCP_30D = "30d"
    PCP_200D = "200d"
    PCP_1Y = "1y"
