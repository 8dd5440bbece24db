"""Configuration loader."""

from __future__ import annotations

import math
from datetime import datetime
from pathlib import Path
from typing import Any

import yaml

from .filters import (
    Predicate,
    filter_by_elapsed_time,
    filter_by_keywords,
    filter_by_price,
)
from .models import FilterCriteria


def load_config(config_path: Path | str | None = None) -> dict[str, Any]:
    """Load config from YAML file."""
    path = Path(config_path) if config_path else Path(__file__).parent.parent.parent / "config.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")
    with open(path) as f:
        return yaml.safe_load(f) or {}


def _bound(section: dict[str, Any], key: str, default: float) -> float:
    """Numeric bound from a config section; missing or null keeps the default."""
    val = section.get(key)
    if val is None:
        return default
    try:
        return float(val)
    except (TypeError, ValueError):
        raise ValueError(f"Config value {key!r} must be a number, got {val!r}") from None


def _keywords(section: dict[str, Any], key: str) -> tuple[str, ...]:
    val = section.get(key) or []
    if isinstance(val, str):
        val = [val]
    return tuple(str(kw) for kw in val)


def _max_age_seconds(recency: dict[str, Any]) -> float:
    """Max age in seconds; hours/days are accepted as conveniences."""
    if recency.get("max_age_seconds") is not None:
        return _bound(recency, "max_age_seconds", math.inf)
    if recency.get("max_age_hours") is not None:
        return _bound(recency, "max_age_hours", math.inf) * 3600
    if recency.get("max_age_days") is not None:
        return _bound(recency, "max_age_days", math.inf) * 86400
    return math.inf


def get_filter_criteria(config: dict[str, Any]) -> FilterCriteria:
    """Extract filter criteria from config."""
    price = config.get("price") or {}
    recency = config.get("recency") or {}
    kw = config.get("keywords") or {}
    return FilterCriteria(
        min_price=_bound(price, "min", 0.0),
        max_price=_bound(price, "max", math.inf),
        max_age_seconds=_max_age_seconds(recency),
        must_include=_keywords(kw, "include"),
        must_exclude=_keywords(kw, "exclude"),
    )


def build_predicates(
    criteria: FilterCriteria,
    now: datetime | None = None,
) -> list[Predicate]:
    """Predicates for the criteria: price, then recency, then keywords."""
    return [
        filter_by_price(criteria.min_price, criteria.max_price),
        filter_by_elapsed_time(criteria.max_age_seconds, now=now),
        filter_by_keywords(criteria.must_include, criteria.must_exclude),
    ]
