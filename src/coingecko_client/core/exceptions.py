# src/coingecko_client/core/exceptions.py


class CoinGeckoError(Exception):
    """Base class for every error raised by the client."""

    pass


class TransportError(CoinGeckoError):
    """The request never produced an HTTP response (DNS, connection, timeout)."""

    pass


class APIError(CoinGeckoError):
    """
    The API answered with a non-200 status.
    `message` is the raw response body, or a synthesized payload carrying the
    status code when the body was empty.
    """

    def __init__(self, status: int, message: str):
        super().__init__(message)
        self.status = status
        self.message = message


class DecodeError(CoinGeckoError):
    """The response body is not valid JSON or does not match the expected schema."""

    pass


class ValidationError(CoinGeckoError, ValueError):
    """A required request parameter was missing. Raised before any network call."""

    pass


class NotFoundError(CoinGeckoError, LookupError):
    """The requested (coin id, currency) cell is absent from a price lookup."""

    pass
