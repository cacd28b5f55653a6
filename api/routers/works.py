"""
Person works endpoints: widget descriptor and the four works modules.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query, Response
from pydantic import BaseModel

from api.deps import CreditsSourceDep
from person_works.widget import FUNCTIONS, WIDGET_METADATA, widget_metadata_dict
from person_works.works.credits import FetchError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/works", tags=["works"])


# --- Pydantic models ---

class Work(BaseModel):
    id: int | None
    type: str
    title: str | None
    description: str | None
    releaseDate: str | None
    posterPath: str | None
    backdropPath: str | None
    rating: float | None
    mediaType: str | None


@router.get("/widget")
def get_widget() -> dict:
    """Widget registration descriptor (modules, params, cache durations)."""
    return widget_metadata_dict()


@router.get("/{module_id}", response_model=list[Work])
def get_module_works(
    module_id: str,
    response: Response,
    source: CreditsSourceDep,
    person_id: str = Query(..., alias="personId", min_length=1),
    language: str = Query("zh-CN"),
    type: str = Query("all", pattern="^(all|movie|tv)$"),
    sort_by: str = Query("popularity.desc"),
) -> list[dict]:
    """
    Run one works module (allWorks, actorWorks, directorWorks, otherWorks) for a TMDb person.
    """
    try:
        module = WIDGET_METADATA.module(module_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown module: {module_id}")

    params = {"personId": person_id, "language": language, "type": type, "sort_by": sort_by}
    try:
        works = FUNCTIONS[module.function_name](params, source=source)
    except FetchError as e:
        logger.warning(f"Fetching works for person {person_id} failed: {e.reason or e}")
        raise HTTPException(status_code=502, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    response.headers["Cache-Control"] = f"public, max-age={module.cache_duration}"
    return works
