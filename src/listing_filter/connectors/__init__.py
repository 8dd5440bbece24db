"""Source connectors for listing data."""

from .base import ListingConnector, ConnectorResult
from .json_file import JsonFileConnector

__all__ = [
    "ListingConnector",
    "ConnectorResult",
    "JsonFileConnector",
]
