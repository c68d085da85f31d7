# tests/coingecko_client/core/test_enums.py

import pytest

from coingecko_client.core.enums import PRO_BASE_URL, PUBLIC_BASE_URL, ApiTier, OrderType


class TestApiTier:
    @pytest.mark.parametrize(
        "api_key, expected",
        [(None, ApiTier.PUBLIC), ("", ApiTier.PUBLIC), ("key", ApiTier.PRO)],
    )
    def test_for_api_key(self, api_key, expected):
        assert ApiTier.for_api_key(api_key) is expected

    def test_base_urls(self):
        assert ApiTier.PUBLIC.base_url == "https://api.coingecko.com/api/v3"
        assert ApiTier.PRO.base_url == "https://pro-api.coingecko.com/api/v3"
        assert PUBLIC_BASE_URL != PRO_BASE_URL


class TestOrderType:
    def test_members_compare_equal_to_api_strings(self):
        assert OrderType.MARKET_CAP_DESC == "market_cap_desc"
        assert OrderType("volume_desc") is OrderType.VOLUME_DESC
