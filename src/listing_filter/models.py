"""Data models for listings and filter criteria."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


def _as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def parse_posted_at(value: Any) -> datetime | None:
    """Parse posting time from a datetime, ISO-8601 text, or epoch seconds."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return _as_utc(value)
    if isinstance(value, bool):
        raise ValueError(f"Invalid posted_at: {value!r}")
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            raise ValueError(f"Invalid posted_at: {value!r}") from None
    s = str(value).strip()
    # fromisoformat() on older interpreters rejects the trailing Z
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    try:
        return _as_utc(datetime.fromisoformat(s))
    except ValueError:
        raise ValueError(f"Invalid posted_at: {value!r}") from None


@dataclass(frozen=True)
class Listing:
    """A single classified ad. Read-only once built."""

    name: str
    price: float
    posted_at: datetime | None = None
    id: str = ""
    source: str = ""
    url: str = ""

    def age_seconds(self, now: datetime | None = None) -> float | None:
        """Seconds since the listing was posted, or None if unknown."""
        if self.posted_at is None:
            return None
        ref = _as_utc(now) if now is not None else datetime.now(timezone.utc)
        return (ref - _as_utc(self.posted_at)).total_seconds()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "source": self.source,
            "name": self.name,
            "price": self.price,
            "posted_at": self.posted_at.isoformat() if self.posted_at else None,
            "url": self.url,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], source: str = "") -> Listing:
        """
        Build a Listing from a plain record.
        Raises ValueError when name is missing or price is not numeric.
        """
        name = data.get("name")
        if name is None:
            name = data.get("title")
        if name is None:
            raise ValueError("Listing record has no name")

        raw_price = data.get("price", 0)
        if isinstance(raw_price, bool):
            raise ValueError(f"Invalid price: {raw_price!r}")
        try:
            price = float(raw_price if raw_price is not None else 0)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid price: {raw_price!r}") from None

        return cls(
            name=str(name),
            price=price,
            posted_at=parse_posted_at(data.get("posted_at")),
            id=str(data.get("id") or ""),
            source=str(data.get("source") or source),
            url=str(data.get("url") or ""),
        )


@dataclass
class FilterCriteria:
    """Filter settings (from config or CLI overrides). Defaults filter nothing."""

    min_price: float = 0.0
    max_price: float = math.inf
    max_age_seconds: float = math.inf
    must_include: tuple[str, ...] = ()
    must_exclude: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "min_price": self.min_price,
            "max_price": self.max_price,
            "max_age_seconds": self.max_age_seconds,
            "must_include": list(self.must_include),
            "must_exclude": list(self.must_exclude),
        }
