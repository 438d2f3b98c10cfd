"""HTTP transport for the Verbiage API."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from pyverbiage._constants import USER_AGENT
from pyverbiage.config import VerbiageConfig
from pyverbiage.exceptions import VerbiageTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Having a protocol here makes it easy to pass test doubles while
    keeping the production implementation (`HttpTransport`) concrete.
    """

    async def get_json(self, endpoint: str, params: Mapping[str, str] | None = None) -> Any:
        ...


class HttpTransport:
    """Plain JSON-over-HTTP GET transport."""

    def __init__(
        self,
        config: VerbiageConfig,
        http_session: aiohttp.ClientSession,
    ) -> None:
        self._config = config
        self._http = http_session

    async def get_json(self, endpoint: str, params: Mapping[str, str] | None = None) -> Any:
        """GET ``base_url + endpoint`` and return the decoded JSON body.

        Raises :class:`VerbiageTransportError` on network failure, any
        non-2xx status, or a body that is not JSON.
        """
        url = f"{self._config.base_url}{endpoint}"
        headers = {
            "accept": "application/json",
            "user-agent": USER_AGENT,
        }

        _logger.debug("GET %s params=%s", url, dict(params or {}))

        try:
            async with self._http.get(url, params=dict(params or {}), headers=headers) as resp:
                body = await resp.read()
                charset = resp.charset or "utf-8"
                if not 200 <= resp.status < 300:
                    raise VerbiageTransportError(
                        f"HTTP {resp.status} from {endpoint}: {body[:200].decode('utf-8', errors='replace')}",
                        status_code=resp.status,
                        endpoint=endpoint,
                    )
        except VerbiageTransportError:
            raise
        except aiohttp.ClientError as exc:
            raise VerbiageTransportError(
                f"Request to {endpoint} failed: {exc}",
                endpoint=endpoint,
            ) from exc

        try:
            text = body.decode(charset)
        except (UnicodeDecodeError, LookupError) as exc:
            raise VerbiageTransportError(
                f"Undecodable {charset} body from {endpoint}: {exc}",
                endpoint=endpoint,
            ) from exc

        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise VerbiageTransportError(
                f"Invalid JSON from {endpoint}: {text[:200]}",
                endpoint=endpoint,
            ) from exc
