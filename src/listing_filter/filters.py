"""Listing filters: predicate factories and the filter pipeline."""

from __future__ import annotations

import logging
import math
from datetime import datetime
from typing import Callable, Iterable, Sequence

from .models import Listing

logger = logging.getLogger(__name__)

Predicate = Callable[[Listing], bool]


def filter_listings(
    listings: Sequence[Listing],
    predicates: Sequence[Predicate],
) -> list[Listing]:
    """
    Keep listings that pass every predicate.
    - Predicates run in the given order and stop at the first failure
    - Input order is preserved; no dedup
    - No predicates keeps everything
    """
    result = [l for l in listings if all(p(l) for p in predicates)]
    logger.debug(
        "Kept %d of %d listings with %d filters",
        len(result),
        len(listings),
        len(predicates),
    )
    return result


def filter_by_price(min_price: float = 0, max_price: float = math.inf) -> Predicate:
    """Price within [min_price, max_price], both inclusive."""

    def predicate(listing: Listing) -> bool:
        return min_price <= listing.price <= max_price

    return predicate


def filter_by_elapsed_time(
    max_age_seconds: float = math.inf,
    now: datetime | None = None,
) -> Predicate:
    """
    Posted at most max_age_seconds before now (inclusive).

    Without a fixed `now`, the current UTC time is read on every call.
    Listings with no posting time only pass when the bound is unlimited.
    """

    def predicate(listing: Listing) -> bool:
        if max_age_seconds == math.inf:
            return True
        age = listing.age_seconds(now)
        if age is None:
            return False
        return age <= max_age_seconds

    return predicate


def _contains_excluded_word(words: list[str], excluded: Iterable[str]) -> bool:
    """Whole-word match of any excluded keyword against the title words."""
    return any(kw in words for kw in excluded)


def filter_by_keywords(
    must_include: Iterable[str] = (),
    must_exclude: Iterable[str] = (),
) -> Predicate:
    """
    Title keyword rules (case-insensitive).
    - Every include keyword must appear as a substring of the title
    - No exclude keyword may equal a whitespace-separated word of the title
    """
    include = [kw.lower() for kw in must_include]
    exclude = [kw.lower() for kw in must_exclude]

    def predicate(listing: Listing) -> bool:
        title = listing.name.lower()
        if not all(kw in title for kw in include):
            return False
        # split() with no separator never yields empty words
        return not _contains_excluded_word(title.split(), exclude)

    return predicate
