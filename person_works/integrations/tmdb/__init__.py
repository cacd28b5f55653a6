"""
TMDb integration clients.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from person_works.integrations.tmdb.client import (
        TmdbClient,
        TmdbClientError,
        fetch_person_combined_credits,
        resolve_api_key,
    )

__all__ = [
    "TmdbClient",
    "TmdbClientError",
    "fetch_person_combined_credits",
    "resolve_api_key",
]


def __getattr__(name: str):
    if name in __all__:
        from person_works.integrations.tmdb import client

        return getattr(client, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
