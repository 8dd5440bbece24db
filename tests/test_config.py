"""Tests for config loading and config-driven predicates."""

import math
from datetime import datetime
from pathlib import Path

import pytest

from listing_filter.config import build_predicates, get_filter_criteria, load_config
from listing_filter.filters import (
    filter_by_elapsed_time,
    filter_by_keywords,
    filter_by_price,
    filter_listings,
)
from listing_filter.models import FilterCriteria, Listing

CONFIG_YAML = """
price:
  min: 50
  max: 500
recency:
  max_age_hours: 24
keywords:
  include: [bike]
  exclude: [scam, parts]
"""


class TestLoadConfig:
    """Tests for YAML loading."""

    def test_loads_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text(CONFIG_YAML)
        cfg = load_config(path)
        assert cfg["price"] == {"min": 50, "max": 500}

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == {}

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")


class TestGetFilterCriteria:
    """Tests for criteria extraction."""

    def test_full_config(self) -> None:
        c = get_filter_criteria(
            {
                "price": {"min": 50, "max": 500},
                "recency": {"max_age_hours": 24},
                "keywords": {"include": ["bike"], "exclude": ["scam", "parts"]},
            }
        )
        assert c == FilterCriteria(
            min_price=50,
            max_price=500,
            max_age_seconds=86400,
            must_include=("bike",),
            must_exclude=("scam", "parts"),
        )

    def test_empty_config_is_permissive(self) -> None:
        assert get_filter_criteria({}) == FilterCriteria()

    def test_nulls_keep_defaults(self) -> None:
        c = get_filter_criteria({"price": {"min": None, "max": None}, "keywords": None})
        assert c.min_price == 0
        assert math.isinf(c.max_price)
        assert c.must_include == ()

    def test_seconds_win_over_days(self) -> None:
        c = get_filter_criteria({"recency": {"max_age_seconds": 90, "max_age_days": 2}})
        assert c.max_age_seconds == 90

    def test_days(self) -> None:
        assert get_filter_criteria({"recency": {"max_age_days": 2}}).max_age_seconds == 172800

    def test_single_keyword_string(self) -> None:
        assert get_filter_criteria({"keywords": {"exclude": "scam"}}).must_exclude == ("scam",)

    def test_non_numeric_bound(self) -> None:
        with pytest.raises(ValueError, match="'max' must be a number"):
            get_filter_criteria({"price": {"max": "cheap"}})


class TestBuildPredicates:
    """Config-driven predicates behave like hand-built ones."""

    def test_matches_hand_built(self, mock_listings: list[Listing], now: datetime) -> None:
        criteria = FilterCriteria(
            min_price=50,
            max_price=500,
            max_age_seconds=86400,
            must_include=("bike",),
            must_exclude=("scam",),
        )
        from_config = filter_listings(mock_listings, build_predicates(criteria, now=now))
        by_hand = filter_listings(
            mock_listings,
            [
                filter_by_price(50, 500),
                filter_by_elapsed_time(86400, now=now),
                filter_by_keywords(["bike"], ["scam"]),
            ],
        )
        assert from_config == by_hand
        assert [l.id for l in from_config] == ["mock-1", "mock-3"]

    def test_default_criteria_keep_everything(self, mock_listings: list[Listing]) -> None:
        assert filter_listings(mock_listings, build_predicates(FilterCriteria())) == mock_listings
