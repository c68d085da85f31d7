# src/coingecko_client/utils/formatter.py

from enum import Enum
from typing import Any, Iterable


# --- Helper Functions for Query Values ---
def bool_to_str(value: bool) -> str:
    return "true" if value else "false"


def int_to_str(value: int) -> str:
    return str(int(value))


def join_csv(values: Iterable[str]) -> str:
    """
    Joins list-valued parameters into the single comma-separated value the API expects.
    Enum members are rendered by value.

    Examples:
        - ['bitcoin', 'ethereum'] -> 'bitcoin,ethereum'
        - [PriceChangePercentage.PCP_1H, '24h'] -> '1h,24h'
    """
    return ",".join(enum_value(v) for v in values)


def enum_value(value: Any) -> Any:
    """Unwraps enum members so str-mixin enums render as their value in query strings."""
    return value.value if isinstance(value, Enum) else value
