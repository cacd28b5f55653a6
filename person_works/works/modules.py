"""
Widget entry points: all, actor, director and other works for a TMDb person.

Each function performs one combined-credits fetch and then shapes the result:
working list -> filter by media type -> sort -> dedupe/format.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Sequence

from person_works.integrations.tmdb.client import TmdbClient
from person_works.works.credits import (
    DEFAULT_LANGUAGE,
    CreditRecord,
    CreditsBundle,
    CreditsSource,
    fetch_credits,
)
from person_works.works.shaping import (
    SORT_POPULARITY_DESC,
    TYPE_ALL,
    apply_sorting,
    filter_by_type,
    filter_director_jobs,
    filter_other_jobs,
    format_results,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorksParams:
    person_id: str
    language: str = DEFAULT_LANGUAGE
    type: str = TYPE_ALL
    sort_by: str = SORT_POPULARITY_DESC

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any] | None) -> "WorksParams":
        """Build from host params (`personId`, `language`, `type`, `sort_by`); falsy values take defaults."""
        p = params or {}
        person_id = str(p.get("personId") or p.get("person_id") or "").strip()
        if not person_id:
            raise ValueError("personId is required.")
        return cls(
            person_id=person_id,
            language=str(p.get("language") or DEFAULT_LANGUAGE),
            type=str(p.get("type") or TYPE_ALL),
            sort_by=str(p.get("sort_by") or SORT_POPULARITY_DESC),
        )


def _default_source() -> CreditsSource:
    return TmdbClient()


def _run(
    params: Mapping[str, Any] | WorksParams | None,
    select: Callable[[CreditsBundle], Sequence[CreditRecord]],
    source: CreditsSource | None,
) -> list[dict[str, Any]]:
    p = params if isinstance(params, WorksParams) else WorksParams.from_mapping(params)
    bundle = fetch_credits(source or _default_source(), p.person_id, p.language)

    items = select(bundle)
    items = filter_by_type(items, p.type)
    items = apply_sorting(items, p.sort_by)
    results = format_results(items)
    logger.debug("Person %s: %d works (type=%s, sort_by=%s)", p.person_id, len(results), p.type, p.sort_by)
    return [r.to_dict() for r in results]


def get_all_works(params: Mapping[str, Any] | WorksParams | None, *, source: CreditsSource | None = None) -> list[dict[str, Any]]:
    return _run(params, lambda b: list(b.cast) + list(b.crew), source)


def get_actor_works(params: Mapping[str, Any] | WorksParams | None, *, source: CreditsSource | None = None) -> list[dict[str, Any]]:
    return _run(params, lambda b: list(b.cast), source)


def get_director_works(params: Mapping[str, Any] | WorksParams | None, *, source: CreditsSource | None = None) -> list[dict[str, Any]]:
    return _run(params, lambda b: filter_director_jobs(b.crew), source)


def get_other_works(params: Mapping[str, Any] | WorksParams | None, *, source: CreditsSource | None = None) -> list[dict[str, Any]]:
    return _run(params, lambda b: filter_other_jobs(b.crew), source)
