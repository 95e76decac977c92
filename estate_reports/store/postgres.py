"""PostgreSQL data source backed by psycopg 3."""

import logging
from typing import Any, Callable

import psycopg
from psycopg import sql
from psycopg.rows import dict_row

from estate_reports.config import PostgresConfig
from estate_reports.exceptions import AccountNotFoundError, TransportError
from estate_reports.models.base import AccountScope, ScopeKind
from estate_reports.store.kinds import SCHEMAS, SCOPE_COLUMNS, EntityKind, FetchFilters
from estate_reports.store.parsing import parse_record

logger = logging.getLogger(__name__)

# Account tables checked by ensure_account()
ACCOUNT_TABLES: dict[ScopeKind, str] = {
    ScopeKind.COMPANY: "company_accounts",
    ScopeKind.USER: "users",
}

# Date column per table, where it differs from the record field name
DATE_COLUMNS: dict[EntityKind, str] = {
    EntityKind.NOTICE: "notice_date",
}


class PostgresDataSource:
    """Account-scoped reads from the hosted Postgres database.

    Each fetch opens its own connection, so concurrent fetches of one
    report never share a cursor. Connection pooling is left to the
    server-side pooler in front of the database.

    Parameters
    ----------
    config : PostgresConfig
        Connection settings.
    connect : Callable[..., Any]
        Connection factory (default ``psycopg.connect``).
    """

    def __init__(
        self,
        config: PostgresConfig,
        connect: Callable[..., Any] = psycopg.connect,
    ) -> None:
        self.config = config
        self._connect = connect

    def ensure_account(self, scope: AccountScope) -> None:
        """Raise ``AccountNotFoundError`` if the scope has no account row."""
        query = sql.SQL("SELECT 1 FROM {table} WHERE id = %s LIMIT 1").format(
            table=sql.Identifier(ACCOUNT_TABLES[scope.kind]),
        )
        rows = self._execute(query, [scope.scope_id], label=f"account {scope}")
        if not rows:
            raise AccountNotFoundError(f"No account for {scope}")

    def fetch(
        self,
        kind: EntityKind,
        scope: AccountScope,
        filters: FetchFilters | None = None,
    ) -> list[Any]:
        """Fetch and validate the ``kind`` rows of one account."""
        query, params = self.build_query(kind, scope, filters)
        rows = self._execute(query, params, label=kind.value)
        logger.debug("Fetched %d %s rows for %s", len(rows), kind.value, scope)
        return [parse_record(kind, row, scope) for row in rows]

    def build_query(
        self,
        kind: EntityKind,
        scope: AccountScope,
        filters: FetchFilters | None = None,
    ) -> tuple[sql.Composed, list[Any]]:
        """Compose the parameterised SELECT for a scoped fetch."""
        schema = SCHEMAS[kind]
        clauses: list[sql.Composable] = []
        params: list[Any] = []

        if kind == EntityKind.WALLET_TRANSACTION and scope.kind == ScopeKind.USER:
            # wallet_transactions has no user_id column; individual users own them via their wallet
            clauses.append(
                sql.SQL("wallet_id IN (SELECT id FROM {wallet} WHERE user_id = %s)").format(
                    wallet=sql.Identifier(SCHEMAS[EntityKind.WALLET].table),
                )
            )
        else:
            clauses.append(
                sql.SQL("{column} = %s").format(column=sql.Identifier(SCOPE_COLUMNS[scope.kind]))
            )
        params.append(scope.scope_id)

        date_column = DATE_COLUMNS.get(kind, schema.date_field)
        order = sql.SQL("")
        limit = sql.SQL("")

        if filters is not None:
            if filters.statuses is not None and schema.status_field:
                clauses.append(
                    sql.SQL("{column} = ANY(%s)").format(column=sql.Identifier(schema.status_field))
                )
                params.append(sorted(filters.statuses))

            if filters.date_range is not None and date_column:
                clauses.append(
                    sql.SQL("{column} >= %s AND {column} < %s").format(
                        column=sql.Identifier(date_column),
                    )
                )
                params.extend([filters.date_range.start, filters.date_range.end])

            if filters.newest_first and date_column:
                order = sql.SQL(" ORDER BY {column} DESC, id DESC").format(
                    column=sql.Identifier(date_column),
                )

            if filters.limit is not None:
                limit = sql.SQL(" LIMIT %s")

        query = sql.SQL("SELECT * FROM {table} WHERE {where}{order}{limit}").format(
            table=sql.Identifier(schema.table),
            where=sql.SQL(" AND ").join(clauses),
            order=order,
            limit=limit,
        )
        if filters is not None and filters.limit is not None:
            params.append(filters.limit)
        return query, params

    def _execute(self, query: sql.Composable, params: list[Any], label: str) -> list[dict[str, Any]]:
        try:
            with self._connect(**self.config.to_dict(), row_factory=dict_row) as conn:
                with conn.cursor() as cur:
                    cur.execute(query, params)
                    return list(cur.fetchall())
        except psycopg.Error as e:
            raise TransportError(f"Fetching {label} failed: {e}") from e
