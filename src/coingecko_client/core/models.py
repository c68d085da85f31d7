# src/coingecko_client/core/models.py


from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class AppBaseModel(BaseModel):
    """
    Base model for all response schemas.
    Field names mirror the API's JSON keys. Unknown keys are dropped so that
    additions on the API side never break decoding.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )


# --- /ping and /simple ---


class Ping(AppBaseModel):
    gecko_says: str


class SimpleSinglePrice(AppBaseModel):
    """One (coin id, currency) cell extracted from a /simple/price lookup."""

    id: str
    currency: str
    market_price: float


# --- /coins/list and /coins/markets ---


class CoinsListItem(AppBaseModel):
    id: str
    symbol: str
    name: str
    # Only populated when include_platform=true.
    platforms: dict[str, str | None] | None = None


class ROIItem(AppBaseModel):
    times: float | None = None
    currency: str | None = None
    percentage: float | None = None


class SparklineItem(AppBaseModel):
    price: list[float | None] = Field(default_factory=list)


class CoinsMarketItem(AppBaseModel):
    """A single row of the paginated market snapshot."""

    id: str
    symbol: str
    name: str
    image: str | None = None

    current_price: float | None = None
    market_cap: float | None = None
    market_cap_rank: int | None = None
    fully_diluted_valuation: float | None = None
    total_volume: float | None = None
    high_24h: float | None = None
    low_24h: float | None = None
    price_change_24h: float | None = None
    price_change_percentage_24h: float | None = None
    market_cap_change_24h: float | None = None
    market_cap_change_percentage_24h: float | None = None

    circulating_supply: float | None = None
    total_supply: float | None = None
    max_supply: float | None = None

    ath: float | None = None
    ath_change_percentage: float | None = None
    ath_date: str | None = None
    atl: float | None = None
    atl_change_percentage: float | None = None
    atl_date: str | None = None

    roi: ROIItem | None = None
    last_updated: str | None = None

    # Present only when requested through sparkline / price_change_percentage.
    sparkline_in_7d: SparklineItem | None = None
    price_change_percentage_1h_in_currency: float | None = None
    price_change_percentage_24h_in_currency: float | None = None
    price_change_percentage_7d_in_currency: float | None = None
    price_change_percentage_14d_in_currency: float | None = None
    price_change_percentage_30d_in_currency: float | None = None
    price_change_percentage_200d_in_currency: float | None = None
    price_change_percentage_1y_in_currency: float | None = None


# --- /coins/{id} building blocks ---


class ImageItem(AppBaseModel):
    thumb: str | None = None
    small: str | None = None
    large: str | None = None


class ReposURL(AppBaseModel):
    github: list[str] = Field(default_factory=list)
    bitbucket: list[str] = Field(default_factory=list)


class LinksItem(AppBaseModel):
    homepage: list[str] = Field(default_factory=list)
    blockchain_site: list[str] = Field(default_factory=list)
    official_forum_url: list[str] = Field(default_factory=list)
    chat_url: list[str] = Field(default_factory=list)
    announcement_url: list[str] = Field(default_factory=list)
    twitter_screen_name: str | None = None
    facebook_username: str | None = None
    telegram_channel_identifier: str | None = None
    subreddit_url: str | None = None
    repos_url: ReposURL | None = None


class MarketItem(AppBaseModel):
    name: str | None = None
    identifier: str | None = None
    has_trading_incentive: bool | None = None


class TickerItem(AppBaseModel):
    base: str
    target: str
    market: MarketItem | None = None
    last: float | None = None
    volume: float | None = None
    converted_last: dict[str, float | None] = Field(default_factory=dict)
    converted_volume: dict[str, float | None] = Field(default_factory=dict)
    trust_score: str | None = None
    bid_ask_spread_percentage: float | None = None
    timestamp: str | None = None
    last_traded_at: str | None = None
    last_fetch_at: str | None = None
    is_anomaly: bool | None = None
    is_stale: bool | None = None
    trade_url: str | None = None
    coin_id: str | None = None
    target_coin_id: str | None = None


class MarketDataItem(AppBaseModel):
    """
    Market data block shared by /coins/{id} and /coins/{id}/history.
    History responses only carry current_price, market_cap and total_volume.
    """

    current_price: dict[str, float | None] = Field(default_factory=dict)
    roi: ROIItem | None = None
    ath: dict[str, float | None] = Field(default_factory=dict)
    ath_change_percentage: dict[str, float | None] = Field(default_factory=dict)
    ath_date: dict[str, str | None] = Field(default_factory=dict)
    atl: dict[str, float | None] = Field(default_factory=dict)
    atl_change_percentage: dict[str, float | None] = Field(default_factory=dict)
    atl_date: dict[str, str | None] = Field(default_factory=dict)
    market_cap: dict[str, float | None] = Field(default_factory=dict)
    market_cap_rank: int | None = None
    fully_diluted_valuation: dict[str, float | None] = Field(default_factory=dict)
    total_volume: dict[str, float | None] = Field(default_factory=dict)
    high_24h: dict[str, float | None] = Field(default_factory=dict)
    low_24h: dict[str, float | None] = Field(default_factory=dict)

    price_change_24h: float | None = None
    price_change_percentage_24h: float | None = None
    price_change_percentage_7d: float | None = None
    price_change_percentage_14d: float | None = None
    price_change_percentage_30d: float | None = None
    price_change_percentage_60d: float | None = None
    price_change_percentage_200d: float | None = None
    price_change_percentage_1y: float | None = None
    market_cap_change_24h: float | None = None
    market_cap_change_percentage_24h: float | None = None

    price_change_24h_in_currency: dict[str, float | None] = Field(default_factory=dict)
    price_change_percentage_1h_in_currency: dict[str, float | None] = Field(default_factory=dict)
    price_change_percentage_24h_in_currency: dict[str, float | None] = Field(default_factory=dict)
    price_change_percentage_7d_in_currency: dict[str, float | None] = Field(default_factory=dict)
    price_change_percentage_14d_in_currency: dict[str, float | None] = Field(default_factory=dict)
    price_change_percentage_30d_in_currency: dict[str, float | None] = Field(default_factory=dict)
    price_change_percentage_60d_in_currency: dict[str, float | None] = Field(default_factory=dict)
    price_change_percentage_200d_in_currency: dict[str, float | None] = Field(default_factory=dict)
    price_change_percentage_1y_in_currency: dict[str, float | None] = Field(default_factory=dict)
    market_cap_change_24h_in_currency: dict[str, float | None] = Field(default_factory=dict)
    market_cap_change_percentage_24h_in_currency: dict[str, float | None] = Field(default_factory=dict)

    total_supply: float | None = None
    max_supply: float | None = None
    circulating_supply: float | None = None
    sparkline_7d: SparklineItem | None = None
    last_updated: str | None = None


class CommunityDataItem(AppBaseModel):
    facebook_likes: int | None = None
    twitter_followers: int | None = None
    reddit_average_posts_48h: float | None = None
    reddit_average_comments_48h: float | None = None
    reddit_subscribers: int | None = None
    reddit_accounts_active_48h: float | None = None
    telegram_channel_user_count: int | None = None


class DeveloperDataItem(AppBaseModel):
    forks: int | None = None
    stars: int | None = None
    subscribers: int | None = None
    total_issues: int | None = None
    closed_issues: int | None = None
    pull_requests_merged: int | None = None
    pull_request_contributors: int | None = None
    commit_count_4_weeks: int | None = None


class PublicInterestItem(AppBaseModel):
    alexa_rank: int | None = None
    bing_matches: int | None = None


class StatusUpdateItem(AppBaseModel):
    description: str | None = None
    category: str | None = None
    created_at: str | None = None
    user: str | None = None
    user_title: str | None = None
    pin: bool | None = None
    project: dict[str, Any] | None = None


# --- /coins/{id} and sub-resources ---


class CoinsID(AppBaseModel):
    """Full coin detail. Blocks switched off by the request flags come back absent."""

    id: str
    symbol: str | None = None
    name: str | None = None
    block_time_in_minutes: int | None = None
    hashing_algorithm: str | None = None
    categories: list[str | None] = Field(default_factory=list)
    localization: dict[str, str | None] = Field(default_factory=dict)
    description: dict[str, str | None] = Field(default_factory=dict)
    links: LinksItem | None = None
    image: ImageItem | None = None
    country_origin: str | None = None
    genesis_date: str | None = None
    market_cap_rank: int | None = None
    coingecko_rank: int | None = None
    coingecko_score: float | None = None
    developer_score: float | None = None
    community_score: float | None = None
    liquidity_score: float | None = None
    public_interest_score: float | None = None
    market_data: MarketDataItem | None = None
    community_data: CommunityDataItem | None = None
    developer_data: DeveloperDataItem | None = None
    public_interest_stats: PublicInterestItem | None = None
    status_updates: list[StatusUpdateItem] = Field(default_factory=list)
    last_updated: str | None = None
    tickers: list[TickerItem] = Field(default_factory=list)


class CoinsIDTickers(AppBaseModel):
    name: str
    tickers: list[TickerItem] = Field(default_factory=list)


class CoinsIDHistory(AppBaseModel):
    id: str
    symbol: str | None = None
    name: str | None = None
    localization: dict[str, str | None] = Field(default_factory=dict)
    image: ImageItem | None = None
    market_data: MarketDataItem | None = None
    community_data: CommunityDataItem | None = None
    developer_data: DeveloperDataItem | None = None
    public_interest_stats: PublicInterestItem | None = None


class CoinsIDMarketChart(AppBaseModel):
    """Each series is a list of [timestamp_ms, value] pairs."""

    prices: list[tuple[float, float]] = Field(default_factory=list)
    market_caps: list[tuple[float, float]] = Field(default_factory=list)
    total_volumes: list[tuple[float, float]] = Field(default_factory=list)


# --- /events ---


class EventCountryItem(AppBaseModel):
    country: str
    code: str


class EventsCountries(AppBaseModel):
    data: list[EventCountryItem]


class EventsTypes(AppBaseModel):
    data: list[str]
    count: int


# --- /exchange_rates, /asset_platforms, /global ---


class ExchangeRatesItem(AppBaseModel):
    name: str
    unit: str
    value: float
    type: str


class ExchangeRatesResponse(AppBaseModel):
    rates: dict[str, ExchangeRatesItem]


class AssetPlatform(AppBaseModel):
    id: str
    chain_identifier: int | None = None
    name: str
    shortname: str | None = None


class Global(AppBaseModel):
    active_cryptocurrencies: int
    upcoming_icos: int | None = None
    ongoing_icos: int | None = None
    ended_icos: int | None = None
    markets: int | None = None
    total_market_cap: dict[str, float] = Field(default_factory=dict)
    total_volume: dict[str, float] = Field(default_factory=dict)
    market_cap_percentage: dict[str, float] = Field(default_factory=dict)
    market_cap_change_percentage_24h_usd: float | None = None
    updated_at: int | None = None


class GlobalResponse(AppBaseModel):
    data: Global
