"""Cache validity and staleness policy.

These objects decide whether the cached state can be trusted and whether
the remote data is newer. Only :class:`StalenessDetector` writes, and
only the last-update baseline.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pyverbiage.models.last_update import UpdateTimestamps
from pyverbiage.models.locales import same_locale_set
from pyverbiage.state.repository import TermRepository

_logger = logging.getLogger(__name__)


class LocaleSetValidator:
    """Compare the requested locale set with the stored one."""

    def __init__(self, repository: TermRepository) -> None:
        self._repository = repository

    def is_unchanged(self, requested: Sequence[str]) -> bool:
        """``False`` when nothing is stored, otherwise order-independent equality."""
        stored = self._repository.get_locales()
        if not stored:
            return False
        return same_locale_set(stored, requested)


class CacheIntegrityChecker:
    """Verify that every stored locale has a TermMap entry."""

    def __init__(self, repository: TermRepository) -> None:
        self._repository = repository

    def is_complete(self) -> bool:
        stored = self._repository.get_locales()
        if not stored:
            return False
        # Existence only; an empty TermMap still counts.
        for locale in stored:
            if not self._repository.has_terms(locale):
                _logger.debug("Cache incomplete: no terms stored for %s", locale)
                return False
        return True


class StalenessDetector:
    """Decide whether remote data is newer than the stored baseline.

    The baseline is adopted on first sight and replaced whenever the
    remote timestamps are newer, so it never moves backwards.
    """

    def __init__(self, repository: TermRepository) -> None:
        self._repository = repository

    def is_newer(self, remote: UpdateTimestamps | None) -> bool:
        """Return ``True`` when a full refetch is warranted.

        ``remote`` is ``None`` when the server reply failed the shape
        check; that always warrants a refetch but never replaces the
        baseline.
        """
        if remote is None:
            return True

        local = self._repository.get_last_update()
        if local is None:
            self._repository.set_last_update(remote)
            return True

        newer = remote.is_newer_than(local)
        if newer:
            self._repository.set_last_update(remote)
        _logger.debug(
            "Remote verbiages=%s terms=%s, local verbiages=%s terms=%s, newer=%s",
            remote.verbiages.isoformat(),
            remote.terms.isoformat(),
            local.verbiages.isoformat(),
            local.terms.isoformat(),
            newer,
        )
        return newer
