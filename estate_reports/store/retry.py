"""Bounded retry of transport failures around any data source."""

import logging
import time
from typing import Any, Callable

from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from estate_reports.config import RetryConfig
from estate_reports.exceptions import TransportError
from estate_reports.models.base import AccountScope
from estate_reports.store.base import DataSource
from estate_reports.store.kinds import EntityKind, FetchFilters

logger = logging.getLogger(__name__)


class RetryingDataSource:
    """Retry ``TransportError`` with exponential backoff.

    Caller errors (``InvalidScopeError``, ``AccountNotFoundError``) and
    validation errors are never retried. After the last attempt the final
    ``TransportError`` propagates.

    Parameters
    ----------
    source : DataSource
        Wrapped data source.
    policy : RetryConfig | None
        Attempts and backoff (default: 3 attempts).
    sleep : Callable[[float], None]
        Sleep function, replaceable in tests.
    """

    def __init__(
        self,
        source: DataSource,
        policy: RetryConfig | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.source = source
        self.policy = policy or RetryConfig()
        self._sleep = sleep

    def ensure_account(self, scope: AccountScope) -> None:
        self._call(f"account {scope}", lambda: self.source.ensure_account(scope))

    def fetch(
        self,
        kind: EntityKind,
        scope: AccountScope,
        filters: FetchFilters | None = None,
    ) -> list[Any]:
        return self._call(kind.value, lambda: self.source.fetch(kind, scope, filters))

    def _retrying(self, label: str) -> Retrying:
        def log_retry(state: RetryCallState) -> None:
            logger.warning(
                "Fetching %s failed (attempt %d/%d), retrying in %.2fs: %s",
                label,
                state.attempt_number,
                self.policy.max_attempts,
                state.next_action.sleep if state.next_action else 0.0,
                state.outcome.exception() if state.outcome else None,
            )

        return Retrying(
            stop=stop_after_attempt(self.policy.max_attempts),
            wait=wait_exponential(
                multiplier=self.policy.backoff_seconds,
                exp_base=self.policy.backoff_multiplier,
                max=self.policy.max_backoff_seconds,
            ),
            retry=retry_if_exception_type(TransportError),
            sleep=self._sleep,
            before_sleep=log_retry,
            reraise=True,
        )

    def _call(self, label: str, operation: Callable[[], Any]) -> Any:
        try:
            return self._retrying(label)(operation)
        except TransportError as e:
            logger.error("Fetching %s failed after %d attempts: %s", label, self.policy.max_attempts, e)
            raise
