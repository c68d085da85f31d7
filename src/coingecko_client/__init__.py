# src/coingecko_client/__init__.py

from .clients.coingecko_client import CoinGeckoClient
from .config.models import CoinGeckoSettings
from .core.exceptions import (
    APIError,
    CoinGeckoError,
    DecodeError,
    NotFoundError,
    TransportError,
    ValidationError,
)

__all__ = [
    "APIError",
    "CoinGeckoClient",
    "CoinGeckoError",
    "CoinGeckoSettings",
    "DecodeError",
    "NotFoundError",
    "TransportError",
    "ValidationError",
]
