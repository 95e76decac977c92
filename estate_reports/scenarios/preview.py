"""Data source serving generated preview portfolios."""

import logging
import threading
import zlib
from datetime import datetime
from typing import Any

from cachetools import LRUCache

from estate_reports.models.base import AccountScope
from estate_reports.scenarios.preview_portfolio import PreviewPortfolioScenario
from estate_reports.store.kinds import EntityKind, FetchFilters
from estate_reports.store.memory import PortfolioStore

logger = logging.getLogger(__name__)


class PreviewDataSource:
    """``DataSource`` backed by a generated portfolio per account scope.

    Only used when preview mode is switched on explicitly. Every valid
    scope has an account; its portfolio is generated on first use from a
    seed derived from the scope id, so repeated runs show the same data.

    Parameters
    ----------
    seed : int | None
        Base seed mixed into every scope's seed.
    num_buildings : int
        Buildings per generated portfolio.
    as_of : datetime | None
        Reference time passed to the scenario.
    max_portfolios : int
        Generated portfolios kept; the least recently used is dropped and
        regenerated, identically, if its scope comes back.
    """

    def __init__(
        self,
        seed: int | None = None,
        num_buildings: int = 3,
        as_of: datetime | None = None,
        max_portfolios: int = 32,
    ) -> None:
        self.seed = seed
        self.num_buildings = num_buildings
        self.as_of = as_of
        self._stores: LRUCache = LRUCache(maxsize=max_portfolios)
        self._lock = threading.Lock()

    def ensure_account(self, scope: AccountScope) -> None:
        self._store_for(scope)

    def fetch(
        self,
        kind: EntityKind,
        scope: AccountScope,
        filters: FetchFilters | None = None,
    ) -> list[Any]:
        return self._store_for(scope).fetch(kind, scope, filters)

    def seed_for(self, scope: AccountScope) -> int:
        return zlib.crc32(str(scope).encode()) ^ (self.seed or 0)

    def _store_for(self, scope: AccountScope) -> PortfolioStore:
        with self._lock:
            store = self._stores.get(scope)
        if store is not None:
            return store

        # Generated outside the lock; a concurrent duplicate for the same
        # scope is identical and dropped.
        logger.info("Generating preview portfolio for %s", scope)
        generated = PreviewPortfolioScenario(
            scope,
            num_buildings=self.num_buildings,
            seed=self.seed_for(scope),
            as_of=self.as_of,
        ).generate()

        with self._lock:
            store = self._stores.get(scope)
            if store is None:
                store = self._stores[scope] = generated
            return store
