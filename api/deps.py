"""
Dependency injection for the TMDb credits source.
"""
from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends, HTTPException

from person_works.integrations.tmdb.client import TmdbClient
from person_works.works.credits import CreditsSource

logger = logging.getLogger(__name__)


def get_credits_source() -> CreditsSource:
    """
    Returns a TMDb client configured from the environment (`TMDB_API_KEY`).
    """
    try:
        return TmdbClient()
    except RuntimeError as e:
        logger.error(f"TMDb client unavailable: {e}")
        raise HTTPException(status_code=503, detail="TMDb is not configured")


# Type alias for dependency injection
CreditsSourceDep = Annotated[CreditsSource, Depends(get_credits_source)]
