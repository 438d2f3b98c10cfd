"""High-level async client that keeps cached verbiage terms in sync."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import aiohttp

from pyverbiage._api.generate import fetch_terms
from pyverbiage._api.last_update import fetch_last_update
from pyverbiage._transport import HttpTransport, Transport
from pyverbiage.config import VerbiageConfig
from pyverbiage.exceptions import VerbiageError, VerbiageTransportError
from pyverbiage.models.last_update import UpdateTimestamps
from pyverbiage.models.locales import TermMap
from pyverbiage.state.events import SyncBranch, SyncEvent, SyncPhase
from pyverbiage.state.policy import CacheIntegrityChecker, LocaleSetValidator, StalenessDetector
from pyverbiage.state.repository import TermRepository
from pyverbiage.state.writer import TermCacheWriter
from pyverbiage.storage.base import PersistentStore
from pyverbiage.storage.memory import MemoryStore

_logger = logging.getLogger(__name__)

EventListener = Callable[[SyncEvent], None]


@dataclass(frozen=True, slots=True)
class SyncOutcome:
    """What a call to :meth:`VerbiageClient.sync` did.

    ``branch`` is ``FRESH`` when the cached locale set was valid and only
    a staleness check ran, ``STALE`` when the cache was cleared and
    rebuilt. ``written`` lists the locales whose terms were persisted.
    """

    branch: SyncBranch
    fetched: bool
    written: tuple[str, ...] = ()


class VerbiageClient:
    """Async client that syncs verbiage terms into a persistent store.

    Usage::

        async with VerbiageClient(config, store=JsonFileStore("terms.json")) as client:
            terms = client.get_terms()

    Entering the context runs :meth:`sync` unless
    ``config.sync_on_enter`` is false.
    """

    def __init__(
        self,
        config: VerbiageConfig | None = None,
        *,
        store: PersistentStore | None = None,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
        on_event: EventListener | None = None,
    ) -> None:
        self._config = config if config is not None else VerbiageConfig()
        self._repository = TermRepository(store if store is not None else MemoryStore())
        self._validator = LocaleSetValidator(self._repository)
        self._checker = CacheIntegrityChecker(self._repository)
        self._detector = StalenessDetector(self._repository)
        self._writer = TermCacheWriter(self._repository)
        self._external_session = session is not None
        self._http_session = session
        self._external_transport = transport is not None
        self._transport = transport
        self._phase = SyncPhase.INIT
        self._listeners: list[EventListener] = []
        if on_event is not None:
            self._listeners.append(on_event)

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> VerbiageClient:
        if self._transport is None:
            if self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            self._transport = HttpTransport(self._config, self._http_session)
        if self._config.sync_on_enter:
            try:
                await self.sync()
            except BaseException:
                await self._close()
                raise
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self._close()

    async def _close(self) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        if not self._external_transport:
            self._transport = None

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def config(self) -> VerbiageConfig:
        return self._config

    @property
    def phase(self) -> SyncPhase:
        """Current step of the sync state machine.

        After a failed sync this stays at the step that raised.
        """
        return self._phase

    @property
    def repository(self) -> TermRepository:
        return self._repository

    @property
    def last_update(self) -> UpdateTimestamps | None:
        return self._repository.get_last_update()

    # ------------------------------------------------------------------
    # Lifecycle signals
    # ------------------------------------------------------------------

    def add_listener(self, listener: EventListener) -> Callable[[], None]:
        """Subscribe to loading signals. Returns a callable that unsubscribes."""
        self._listeners.append(listener)

        def _remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _remove

    def _emit(self, event: SyncEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                _logger.debug("Listener for %s failed", event, exc_info=True)

    # ------------------------------------------------------------------
    # Sync
    # ------------------------------------------------------------------

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise VerbiageError("Client not initialized. Use 'async with VerbiageClient(...) as client:'")
        return self._transport

    async def sync(self) -> SyncOutcome:
        """Bring the cache in line with the configured locales and the server.

        A valid cache (same locale set, every locale present) only costs
        a last-update request, and terms are refetched only when that
        reports newer data. Anything else clears the requested locales
        and rebuilds the cache.

        Transport failures propagate; keys written before the failure
        are left as they are.
        """
        transport = self._require_transport()
        requested = list(self._config.locales)

        self._phase = SyncPhase.DECIDING
        if self._validator.is_unchanged(requested) and self._checker.is_complete():
            self._phase = SyncPhase.CHECKING_STALENESS
            remote = await self._load_last_update(transport)
            if not self._detector.is_newer(remote):
                _logger.debug("Cached terms for %s are up to date", requested)
                self._phase = SyncPhase.IDLE
                return SyncOutcome(SyncBranch.FRESH, fetched=False)
            written = await self._refresh_terms(transport, requested)
            return SyncOutcome(SyncBranch.FRESH, fetched=True, written=written)

        self._phase = SyncPhase.CLEARING
        stale = self._repository.get_locales()
        _logger.debug("Cache invalid (stored=%s, requested=%s), rebuilding", stale, requested)
        self._repository.remove_terms(dict.fromkeys([*requested, *stale]))
        self._repository.set_locales(requested)
        remote = await self._load_last_update(transport)
        if remote is not None:
            self._repository.set_last_update(remote)
        written = await self._refresh_terms(transport, requested)
        return SyncOutcome(SyncBranch.STALE, fetched=True, written=written)

    async def _load_last_update(self, transport: Transport) -> UpdateTimestamps | None:
        try:
            return await fetch_last_update(transport)
        except VerbiageTransportError:
            _logger.warning("Fetching last-update timestamps failed", exc_info=True)
            raise

    async def _refresh_terms(self, transport: Transport, locales: list[str]) -> tuple[str, ...]:
        self._emit(SyncEvent.LOADING_STARTED)
        self._phase = SyncPhase.FETCHING
        try:
            payload = await fetch_terms(transport, locales, tag=self._config.tag)
        except VerbiageTransportError:
            _logger.warning("Fetching terms for %s failed", locales, exc_info=True)
            raise
        written = tuple(self._writer.persist(payload))
        self._emit(SyncEvent.LOADING_FINISHED)
        self._phase = SyncPhase.IDLE
        return written

    # ------------------------------------------------------------------
    # Cache queries
    # ------------------------------------------------------------------

    def get_terms(self) -> dict[str, TermMap]:
        """Return the cached TermMap of every stored locale (``{}`` when missing)."""
        terms: dict[str, TermMap] = {}
        for locale in self._repository.get_locales():
            stored = self._repository.get_terms(locale)
            terms[locale] = stored if stored is not None else {}
        return terms

    def clear_cache(self) -> None:
        """Remove stored terms, timestamps and the locale set. Idempotent."""
        self._repository.remove_terms(self._repository.get_locales())
        self._repository.remove_last_update()
        self._repository.remove_locales()
