"""Local JSON file connector.

Accepts either a top-level array of records or an object with a
"listings" (or "results"/"data") array.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..models import Listing
from .base import ConnectorResult, ListingConnector

logger = logging.getLogger(__name__)


class JsonFileConnector(ListingConnector):
    """Reads listing records from a JSON file on disk."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    @property
    def source_name(self) -> str:
        return "json_file"

    def fetch(self) -> ConnectorResult:
        """Load and normalize every record; bad records are reported, not raised."""
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            return ConnectorResult(
                listings=[],
                raw_payloads=[],
                source=self.source_name,
                errors=[f"{self.path}: {e!s}"],
            )

        listings, raw_list, errors = self._normalize(data)
        logger.debug("Loaded %d listings from %s (%d errors)", len(listings), self.path, len(errors))
        return ConnectorResult(
            listings=listings,
            raw_payloads=raw_list,
            source=self.source_name,
            errors=errors,
        )

    def _normalize(self, data: Any) -> tuple[list[Listing], list[dict], list[str]]:
        listings: list[Listing] = []
        raw_list: list[dict] = []
        errors: list[str] = []

        items = data if isinstance(data, list) else None
        if isinstance(data, dict):
            key = next((k for k in ("listings", "results", "data") if k in data), None)
            items = data[key] if key else None

        if not isinstance(items, list):
            return listings, raw_list, [f"{self.path}: no listing array found"]

        for i, item in enumerate(items):
            if not isinstance(item, dict):
                errors.append(f"record {i}: expected an object, got {type(item).__name__}")
                continue
            raw_list.append(item)
            try:
                listings.append(Listing.from_dict(item, source=self.source_name))
            except ValueError as e:
                errors.append(f"record {i}: {e!s}")

        return listings, raw_list, errors
