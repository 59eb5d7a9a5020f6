"""Request parameter builder for search endpoints."""

from __future__ import annotations

from typing import Any

import httpx

from stripe_query._format import format_value


def build_search_params(query: str, **kwargs: Any) -> httpx.QueryParams:
    """Build the query parameters of a ``/search`` request.

    The rendered query is sent as ``query``. Remaining keyword arguments
    (``limit``, ``page``, ...) are added as-is; ``None`` values are skipped.

    Args:
        query: The rendered search query.
        **kwargs: Extra parameters; booleans are rendered as ``true``/``false``.

    Returns:
        Encoded parameters suitable for httpx ``params``.
    """
    params: list[tuple[str, str]] = [("query", query)]
    for key, value in kwargs.items():
        if value is None:
            continue
        params.append((key, format_value(value)))
    return httpx.QueryParams(params)
