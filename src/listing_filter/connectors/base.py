"""Base connector interface for listing sources."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models import Listing


@dataclass
class ConnectorResult:
    """Result of a connector fetch operation."""

    listings: list[Listing]
    raw_payloads: list[dict]
    source: str
    errors: list[str]


class ListingConnector(ABC):
    """
    Abstract interface for listing sources.
    Implementations: local JSON files.
    """

    @abstractmethod
    def fetch(self) -> ConnectorResult:
        """
        Load listings from the source.
        Returns normalized listings + raw records for debugging.
        """
        ...

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Identifier for this listing source."""
        ...
