"""Environment configuration: `.env` discovery and trimmed variable lookup."""
from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

ENV_FILE_VAR = "PERSON_WORKS_ENV_FILE"


def load_env(*, override: bool = False) -> Path | None:
    """
    Load the first `.env` found: `$PERSON_WORKS_ENV_FILE`, the repo root, then the cwd.
    """
    repo_root = Path(__file__).resolve().parents[2]
    candidates = [
        repo_root / ".env",
        Path.cwd() / ".env",
    ]
    explicit = (os.getenv(ENV_FILE_VAR) or "").strip()
    if explicit:
        candidates.insert(0, Path(explicit))
    for path in candidates:
        if path.is_file():
            load_dotenv(dotenv_path=path, override=override)
            return path
    return None


def get_env(name: str, default: str = "") -> str:
    return (os.getenv(name) or default).strip()
