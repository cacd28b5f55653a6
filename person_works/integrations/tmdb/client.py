from __future__ import annotations

import logging
from typing import Any, Mapping

import requests

from person_works.utils.env import get_env, load_env

TMDB_API_BASE_URL = "https://api.themoviedb.org/3"

logger = logging.getLogger(__name__)


class TmdbClientError(RuntimeError):
    def __init__(self, message: str, *, status_code: int | None = None, body_snippet: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body_snippet = body_snippet


def _require_api_key(api_key: str | None) -> str:
    resolved = resolve_api_key(api_key)
    if not resolved:
        raise RuntimeError("TMDB_API_KEY is not set.")
    return resolved


def resolve_api_key(api_key: str | None = None) -> str | None:
    """
    Best-effort API key resolution for callers that want to continue when the key is missing.
    """

    if not api_key:
        load_env()
    resolved = (api_key or "").strip() or get_env("TMDB_API_KEY")
    return resolved or None


def _request_json(
    session: requests.Session,
    url: str,
    *,
    params: Mapping[str, Any] | None = None,
    timeout_seconds: float = 20.0,
) -> dict[str, Any]:
    headers = {
        "accept": "application/json",
        "user-agent": "Mozilla/5.0",
    }

    # Single attempt, no retries.
    try:
        resp = session.get(url, params=params, headers=headers, timeout=timeout_seconds)
    except requests.RequestException as exc:
        raise TmdbClientError(f"TMDb request failed: {exc}") from exc

    if resp.status_code != 200:
        raise TmdbClientError(
            f"TMDb request failed with HTTP {resp.status_code}.",
            status_code=resp.status_code,
            body_snippet=(resp.text or "")[:400],
        )

    try:
        payload = resp.json()
    except ValueError as exc:
        raise TmdbClientError(
            "TMDb returned non-JSON response.",
            status_code=resp.status_code,
            body_snippet=(resp.text or "")[:400],
        ) from exc

    if not isinstance(payload, dict):
        raise TmdbClientError("TMDb returned unexpected JSON shape (not an object).")
    return payload


class TmdbClient:
    """
    Minimal `get(path, params)` capability over the TMDb v3 API.

    Paths are relative to the API root, e.g. `person/287/combined_credits`.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        session: requests.Session | None = None,
        base_url: str = TMDB_API_BASE_URL,
        timeout_seconds: float = 20.0,
    ) -> None:
        self.api_key = _require_api_key(api_key)
        self.session = session or requests.Session()
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds

    def get(self, path: str, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        url = f"{self.base_url}/{path.lstrip('/')}"
        query: dict[str, Any] = {"api_key": self.api_key}
        query.update({k: v for k, v in (params or {}).items() if v is not None})
        logger.debug("GET %s params=%s", url, sorted(k for k in query if k != "api_key"))
        return _request_json(self.session, url, params=query, timeout_seconds=self.timeout_seconds)


def fetch_person_combined_credits(
    person_id: str | int,
    *,
    language: str = "zh-CN",
    api_key: str | None = None,
    session: requests.Session | None = None,
) -> dict[str, Any]:
    """
    Fetch a person's combined movie + TV credits.

    Returns the full JSON object as returned by `/3/person/{id}/combined_credits`
    (`cast` and `crew` lists, each item tagged with `media_type`).
    """

    client = TmdbClient(api_key=api_key, session=session)
    return client.get(f"person/{person_id}/combined_credits", params={"language": language})
