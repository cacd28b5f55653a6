from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests

from person_works.integrations.tmdb import client as mod
from person_works.integrations.tmdb.client import TmdbClient, TmdbClientError


def _response(status_code: int = 200, payload=None, *, text: str = "", json_error: bool = False) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    resp.text = text
    if json_error:
        resp.json.side_effect = ValueError("not json")
    else:
        resp.json.return_value = payload
    return resp


def test_get_builds_url_and_passes_api_key_and_params() -> None:
    session = MagicMock()
    session.get.return_value = _response(payload={"cast": [], "crew": []})

    client = TmdbClient(api_key="k123", session=session)
    payload = client.get("person/287/combined_credits", params={"language": "zh-CN"})

    assert payload == {"cast": [], "crew": []}
    assert session.get.call_count == 1
    args, kwargs = session.get.call_args
    assert args[0] == "https://api.themoviedb.org/3/person/287/combined_credits"
    assert kwargs["params"] == {"api_key": "k123", "language": "zh-CN"}
    assert kwargs["timeout"] == 20.0


def test_get_drops_none_params_and_strips_slashes() -> None:
    session = MagicMock()
    session.get.return_value = _response(payload={})

    client = TmdbClient(api_key="k", session=session, base_url="https://tmdb.test/3/")
    client.get("/person/1/combined_credits", params={"language": None})

    args, kwargs = session.get.call_args
    assert args[0] == "https://tmdb.test/3/person/1/combined_credits"
    assert kwargs["params"] == {"api_key": "k"}


def test_non_200_raises_without_retry() -> None:
    session = MagicMock()
    session.get.return_value = _response(503, text="upstream down")

    client = TmdbClient(api_key="k", session=session)
    with pytest.raises(TmdbClientError) as excinfo:
        client.get("person/1/combined_credits")

    assert excinfo.value.status_code == 503
    assert excinfo.value.body_snippet == "upstream down"
    assert session.get.call_count == 1


def test_request_exception_is_wrapped() -> None:
    session = MagicMock()
    session.get.side_effect = requests.ConnectionError("boom")

    client = TmdbClient(api_key="k", session=session)
    with pytest.raises(TmdbClientError) as excinfo:
        client.get("person/1/combined_credits")

    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)


def test_non_json_and_non_object_payloads_raise() -> None:
    session = MagicMock()
    client = TmdbClient(api_key="k", session=session)

    session.get.return_value = _response(json_error=True, text="<html>")
    with pytest.raises(TmdbClientError, match="non-JSON"):
        client.get("person/1/combined_credits")

    session.get.return_value = _response(payload=[1, 2, 3])
    with pytest.raises(TmdbClientError, match="not an object"):
        client.get("person/1/combined_credits")


def test_missing_api_key_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(mod, "load_env", lambda *args, **kwargs: None)
    monkeypatch.delenv("TMDB_API_KEY", raising=False)

    with pytest.raises(RuntimeError, match="TMDB_API_KEY"):
        TmdbClient(session=MagicMock())
    assert mod.resolve_api_key() is None


def test_api_key_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(mod, "load_env", lambda *args, **kwargs: None)
    monkeypatch.setenv("TMDB_API_KEY", "  env-key  ")

    assert TmdbClient(session=MagicMock()).api_key == "env-key"


def test_fetch_person_combined_credits_uses_language() -> None:
    session = MagicMock()
    session.get.return_value = _response(payload={"id": 287, "cast": []})

    payload = mod.fetch_person_combined_credits(287, language="en-US", api_key="k", session=session)

    assert payload["id"] == 287
    args, kwargs = session.get.call_args
    assert args[0].endswith("/person/287/combined_credits")
    assert kwargs["params"]["language"] == "en-US"
