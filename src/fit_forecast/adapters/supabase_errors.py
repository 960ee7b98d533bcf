"""Helpers for translating Supabase failures."""

from typing import Any, Protocol

import httpx
from supabase import PostgrestAPIError

from fit_forecast.domain.errors import PersistenceFailure


class _Executable(Protocol):
    def execute(self) -> Any: ...


def execute(query: _Executable) -> Any:
    """Run a Supabase query, raising ``PersistenceFailure`` on any error."""
    try:
        return query.execute()
    except (PostgrestAPIError, httpx.HTTPError) as exc:
        raise PersistenceFailure() from exc
