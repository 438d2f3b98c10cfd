"""Term generation endpoint: /generate."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pyverbiage._constants import GENERATE_ENDPOINT
from pyverbiage._transport import Transport
from pyverbiage.models.locales import format_locale_set


def build_generate_params(locales: Sequence[str], tag: str | None = None) -> dict[str, str]:
    params = {"locales": format_locale_set(locales)}
    if tag:
        params["tag"] = tag
    return params


async def fetch_terms(
    transport: Transport,
    locales: Sequence[str],
    *,
    tag: str | None = None,
) -> Any:
    """Fetch TermMaps for *locales*, keyed by locale code.

    The reply is returned as received; shape checking happens when it is
    persisted.
    """
    return await transport.get_json(GENERATE_ENDPOINT, build_generate_params(locales, tag))
