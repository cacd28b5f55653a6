"""
Credit fetching and shaping for the person works widget.
"""

from person_works.works.credits import (
    CreditRecord,
    CreditsBundle,
    CreditsResult,
    FetchError,
    fetch_credits,
    load_credits,
)
from person_works.works.modules import (
    WorksParams,
    get_actor_works,
    get_all_works,
    get_director_works,
    get_other_works,
)

__all__ = [
    "CreditRecord",
    "CreditsBundle",
    "CreditsResult",
    "FetchError",
    "WorksParams",
    "fetch_credits",
    "get_actor_works",
    "get_all_works",
    "get_director_works",
    "get_other_works",
    "load_credits",
]
