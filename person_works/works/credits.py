"""Fetch and normalize a person's combined TMDb credits."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol

from person_works.integrations.tmdb.client import TmdbClientError

DEFAULT_LANGUAGE = "zh-CN"
FETCH_FAILED_MESSAGE = "获取作品数据失败"

logger = logging.getLogger(__name__)


class CreditsSource(Protocol):
    def get(self, path: str, params: Mapping[str, Any] | None = None) -> Mapping[str, Any] | None: ...


class FetchError(RuntimeError):
    """Raised when a person's credits could not be retrieved."""

    def __init__(self, message: str = FETCH_FAILED_MESSAGE, *, reason: str | None = None) -> None:
        super().__init__(message)
        self.reason = reason


@dataclass(frozen=True)
class CreditRecord:
    """One movie or TV credit from `/person/{id}/combined_credits`."""
    id: int | None
    title: str | None = None
    overview: str | None = None
    release_date: str | None = None  # release_date for movies, first_air_date for tv
    poster_path: str | None = None
    backdrop_path: str | None = None
    vote_average: float | None = None
    media_type: str | None = None
    job: str | None = None  # crew only
    department: str | None = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def rating(self) -> float:
        return self.vote_average or 0


@dataclass(frozen=True)
class CreditsBundle:
    cast: tuple[CreditRecord, ...] = ()
    crew: tuple[CreditRecord, ...] = ()


@dataclass(frozen=True)
class CreditsResult:
    """Outcome of a credits load: a bundle, or the reason there is none."""
    bundle: CreditsBundle | None = None
    reason: str | None = None
    error: Exception | None = field(default=None, repr=False, compare=False)

    @property
    def ok(self) -> bool:
        return self.bundle is not None


def normalize_credit(item: Mapping[str, Any]) -> CreditRecord:
    return CreditRecord(
        id=item.get("id"),
        title=item.get("title") or item.get("name"),
        overview=item.get("overview"),
        release_date=item.get("release_date") or item.get("first_air_date"),
        poster_path=item.get("poster_path"),
        backdrop_path=item.get("backdrop_path"),
        vote_average=item.get("vote_average"),
        media_type=item.get("media_type"),
        job=item.get("job"),
        department=item.get("department"),
        raw=dict(item),
    )


def _normalize_list(value: Any) -> tuple[CreditRecord, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(normalize_credit(item) for item in value if isinstance(item, Mapping))


def load_credits(source: CreditsSource, person_id: str | int, language: str | None = None) -> CreditsResult:
    """
    Issue one combined-credits read and normalize every cast and crew record.

    Never raises for transport or shape problems; inspect `CreditsResult.ok`.
    """

    path = f"person/{person_id}/combined_credits"
    try:
        payload = source.get(path, params={"language": language or DEFAULT_LANGUAGE})
    except TmdbClientError as exc:
        logger.warning("Combined credits request for person %s failed: %s", person_id, exc)
        return CreditsResult(reason=str(exc), error=exc)

    if not isinstance(payload, Mapping):
        return CreditsResult(reason="empty response")

    cast = payload.get("cast")
    crew = payload.get("crew")
    if not isinstance(cast, list) and not isinstance(crew, list):
        return CreditsResult(reason="response has neither cast nor crew")

    bundle = CreditsBundle(cast=_normalize_list(cast), crew=_normalize_list(crew))
    logger.debug("Person %s: %d cast, %d crew credits", person_id, len(bundle.cast), len(bundle.crew))
    return CreditsResult(bundle=bundle)


def fetch_credits(source: CreditsSource, person_id: str | int, language: str | None = None) -> CreditsBundle:
    result = load_credits(source, person_id, language)
    if result.bundle is None:
        raise FetchError(reason=result.reason) from result.error
    return result.bundle
