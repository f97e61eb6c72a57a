"""Tests for the calorie lookup table."""

import pytest

from calorie_estimator.domain.calorie_table import CALORIE_TABLE, find_shadowed_keys


def test_table_order_is_match_priority() -> None:
    assert list(CALORIE_TABLE) == [
        "egg",
        "eggs",
        "banana",
        "toast",
        "butter",
        "coffee",
        "orange juice",
        "milk",
        "chicken breast",
        "rice",
        "apple",
        "yogurt",
        "oatmeal",
    ]


def test_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        CALORIE_TABLE["pizza"] = 285  # type: ignore[index]


def test_default_table_flags_eggs() -> None:
    assert find_shadowed_keys(CALORIE_TABLE) == [("eggs", "egg")]


def test_shadowed_keys_depend_on_order() -> None:
    assert find_shadowed_keys({"eggs": 78, "egg": 78}) == []
    assert find_shadowed_keys({"milk": 1, "oat milk": 2, "milkshake": 3}) == [
        ("oat milk", "milk"),
        ("milkshake", "milk"),
    ]
