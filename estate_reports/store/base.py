"""Data access contract shared by every backing store."""

from typing import Any, Protocol, runtime_checkable

from estate_reports.models.base import AccountScope
from estate_reports.store.kinds import EntityKind, FetchFilters


@runtime_checkable
class DataSource(Protocol):
    """Read-only, account-scoped access to entity collections.

    Implementations raise ``AccountNotFoundError`` for unknown scopes and
    ``TransportError`` when the backing store fails. They must be safe to
    call from several threads at once.
    """

    def ensure_account(self, scope: AccountScope) -> None:
        """Raise ``AccountNotFoundError`` if the scope has no account record."""
        ...

    def fetch(
        self,
        kind: EntityKind,
        scope: AccountScope,
        filters: FetchFilters | None = None,
    ) -> list[Any]:
        """Return the ``kind`` records of exactly this scope."""
        ...
