"""Last-update endpoint: /last-update."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from pyverbiage._constants import LAST_UPDATE_ENDPOINT
from pyverbiage._transport import Transport
from pyverbiage.models.last_update import UpdateTimestamps
from pyverbiage.models.locales import is_plain_payload

_logger = logging.getLogger(__name__)


def parse_last_update(payload: object) -> UpdateTimestamps | None:
    """Validate a last-update reply.

    Returns ``None`` for anything that is not a non-empty object with
    both timestamps readable; callers treat that as a malformed payload
    and leave the cache alone.
    """
    if not is_plain_payload(payload):
        _logger.debug("Dropping malformed last-update payload: %r", payload)
        return None
    try:
        return UpdateTimestamps.model_validate(dict(payload))
    except ValidationError:
        _logger.debug("Dropping last-update payload with unreadable timestamps: %r", payload)
        return None


async def fetch_last_update(transport: Transport) -> UpdateTimestamps | None:
    """Fetch when verbiages and terms last changed on the server."""
    payload = await transport.get_json(LAST_UPDATE_ENDPOINT)
    return parse_last_update(payload)
