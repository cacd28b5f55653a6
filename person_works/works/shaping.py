"""
Filter, sort and format normalized credits for display.

None of these functions raise on missing optional fields: a missing rating
counts as 0, a missing job never matches a role filter, and a missing date
sorts last.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Iterable, Sequence

from person_works.works.credits import CreditRecord

TYPE_ALL = "all"
SORT_RELEASE_DATE_DESC = "release_date.desc"
SORT_VOTE_AVERAGE_DESC = "vote_average.desc"
SORT_POPULARITY_DESC = "popularity.desc"

OUTPUT_TYPE_TAG = "tmdb"

_DATE_FORMATS = ("%Y-%m-%d", "%Y-%m", "%Y")


@dataclass(frozen=True)
class OutputRecord:
    id: int | None
    title: str | None
    description: str | None
    release_date: str | None
    poster_path: str | None
    backdrop_path: str | None
    rating: float | None
    media_type: str | None
    type: str = OUTPUT_TYPE_TAG

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "title": self.title,
            "description": self.description,
            "releaseDate": self.release_date,
            "posterPath": self.poster_path,
            "backdropPath": self.backdrop_path,
            "rating": self.rating,
            "mediaType": self.media_type,
        }


def filter_by_type(records: Sequence[CreditRecord], target_type: str) -> Sequence[CreditRecord]:
    if target_type == TYPE_ALL:
        return records
    return [r for r in records if r.media_type == target_type]


def _job(record: CreditRecord) -> str:
    return (record.job or "").lower()


def filter_director_jobs(records: Iterable[CreditRecord]) -> list[CreditRecord]:
    return [r for r in records if "director" in _job(r)]


def filter_other_jobs(records: Iterable[CreditRecord]) -> list[CreditRecord]:
    out: list[CreditRecord] = []
    for r in records:
        job = _job(r)
        if job and "director" not in job and "actor" not in job:
            out.append(r)
    return out


def parse_release_date(value: str | None) -> date | None:
    """Parse `YYYY-MM-DD` (or a bare year / year-month) into a date."""
    if not value:
        return None
    raw = str(value).strip()
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(raw, fmt).date()
        except ValueError:
            continue
    return None


def _release_sort_key(record: CreditRecord) -> date:
    # Missing or unparsable dates rank as the earliest date, i.e. last when descending.
    return parse_release_date(record.release_date) or date.min


def apply_sorting(records: Iterable[CreditRecord], sort_by: str | None) -> list[CreditRecord]:
    """
    Return a new list ordered by `sort_by`.

    `popularity.desc` and unknown values keep the upstream order, which TMDb
    already returns by popularity. Both descending sorts are stable.
    """

    items = list(records)
    if sort_by == SORT_VOTE_AVERAGE_DESC:
        items.sort(key=lambda r: r.rating, reverse=True)
    elif sort_by == SORT_RELEASE_DATE_DESC:
        items.sort(key=_release_sort_key, reverse=True)
    return items


def format_results(records: Iterable[CreditRecord]) -> list[OutputRecord]:
    seen: set[Any] = set()
    results: list[OutputRecord] = []
    for record in records:
        if record.id in seen:
            continue
        seen.add(record.id)
        results.append(
            OutputRecord(
                id=record.id,
                title=record.title,
                description=record.overview,
                release_date=record.release_date,
                poster_path=record.poster_path,
                backdrop_path=record.backdrop_path,
                rating=record.vote_average,
                media_type=record.media_type,
            )
        )
    return results
