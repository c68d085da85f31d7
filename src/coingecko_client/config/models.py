# src/coingecko_client/config/models.py

# --- Built Ins  ---
from typing import Optional

# --- Installed  ---
from pydantic import BaseModel, Field, computed_field, SecretStr

# --- Local Imports  ---
from ..core.enums import ApiTier


class CoinGeckoSettings(BaseModel):
    # The key is optional: without it the public tier is used.
    api_key: Optional[SecretStr] = None

    # Explicit host override, e.g. a mock server or a proxy.
    base_url: Optional[str] = None

    request_timeout_s: float = Field(
        default=30.0,
        gt=0,
        description="Total timeout applied to every request, in seconds."
    )

    @computed_field
    @property
    def tier(self) -> ApiTier:
        return ApiTier.for_api_key(self.api_key_value)

    @computed_field
    @property
    def resolved_base_url(self) -> str:
        """An explicit base_url wins; otherwise the tier decides."""
        if self.base_url:
            return self.base_url.rstrip("/")
        return self.tier.base_url

    @property
    def api_key_value(self) -> Optional[str]:
        if self.api_key is None:
            return None
        return self.api_key.get_secret_value() or None
