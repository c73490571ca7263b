"""MongoDB helpers for reading the daily sales summary.

Centralizes creation of Mongo clients and the one read the dashboard needs.
"""

from __future__ import annotations

from typing import Any

import certifi
from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database


def _wants_tls(uri: str) -> bool:
    lowered = uri.lower()
    return lowered.startswith("mongodb+srv://") or "tls=true" in lowered or "ssl=true" in lowered


def get_client(uri: str) -> MongoClient:
    """Return a configured PyMongo MongoClient for the provided URI.

    TLS with the certifi CA bundle is enabled for Atlas-style SRV URIs and
    for URIs that ask for TLS; plain local URIs connect without it.

    Args:
        uri: MongoDB connection URI.

    Returns:
        Configured MongoClient instance.
    """
    options: dict[str, Any] = {
        "serverSelectionTimeoutMS": 30000,
        "socketTimeoutMS": 30000,
        "connectTimeoutMS": 30000,
    }
    if _wants_tls(uri):
        options["tls"] = True
        options["tlsCAFile"] = certifi.where()
    return MongoClient(uri, **options)


def get_db(
    client: MongoClient[dict[str, Any]],
    db_name: str,
) -> Database[dict[str, Any]]:
    """Return the named Database instance from a MongoClient."""
    return client[db_name]


def fetch_sales_summary(collection: Collection[dict[str, Any]]) -> list[dict[str, Any]]:
    """Return every daily sales document, oldest first, without `_id`.

    Args:
        collection: Collection holding one document per day.

    Returns:
        List of raw documents; validation is left to the caller.
    """
    cursor = collection.find({}, {"_id": 0}).sort("date", ASCENDING)
    return list(cursor)
