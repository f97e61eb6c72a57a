"""Fixed calorie lookup table."""

from collections.abc import Mapping
from types import MappingProxyType

# Iteration order is the match priority.
CALORIE_TABLE: Mapping[str, int] = MappingProxyType(
    {
        "egg": 78,
        "eggs": 78,
        "banana": 105,
        "toast": 75,
        "butter": 102,  # per tbsp
        "coffee": 2,
        "orange juice": 112,  # 8 oz
        "milk": 122,  # 8 oz whole milk
        "chicken breast": 165,  # per 100g cooked
        "rice": 206,  # 1 cup cooked
        "apple": 95,
        "yogurt": 150,
        "oatmeal": 158,
    }
)


def find_shadowed_keys(table: Mapping[str, int]) -> list[tuple[str, str]]:
    """Return (key, earlier_key) pairs where key can never be the first match.

    A key is shadowed when a key that comes before it in iteration order is
    a substring of it: any segment containing the key also contains the
    earlier one.
    """
    shadowed: list[tuple[str, str]] = []
    seen: list[str] = []
    for key in table:
        for earlier in seen:
            if earlier in key:
                shadowed.append((key, earlier))
                break
        seen.append(key)
    return shadowed
