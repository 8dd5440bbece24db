"""Pytest fixtures."""

from datetime import datetime, timedelta, timezone

import pytest

from listing_filter.models import Listing

NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    """Fixed reference time for recency tests."""
    return NOW


@pytest.fixture
def mock_listing() -> Listing:
    """Single mock listing."""
    return Listing(
        id="test-1",
        source="mock",
        name="Running Shoes For Sale",
        price=45,
        posted_at=NOW - timedelta(hours=2),
        url="https://example.com/1",
    )


@pytest.fixture
def mock_listings() -> list[Listing]:
    """Mixed listings: cheap/expensive, fresh/stale, clean/flagged titles."""
    return [
        Listing(
            id="mock-1",
            source="mock",
            name="Road bike, barely used",
            price=300,
            posted_at=NOW - timedelta(minutes=30),
        ),
        Listing(
            id="mock-2",
            source="mock",
            name="Mountain bike parts scam",
            price=80,
            posted_at=NOW - timedelta(days=3),
        ),
        Listing(
            id="mock-3",
            source="mock",
            name="Kids bike with training wheels",
            price=60,
            posted_at=NOW - timedelta(hours=5),
        ),
        Listing(
            id="mock-4",
            source="mock",
            name="Vintage lamp",
            price=1200,
            posted_at=None,
        ),
    ]
