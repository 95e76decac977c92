"""Base models shared across the reporting layer."""

import re
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from enum import Enum

from estate_reports.exceptions import InvalidScopeError

# RFC 4122 UUID, versions 1-5
_UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


def is_valid_scope_id(value: str | None) -> bool:
    """Return True if ``value`` is a well-formed account identifier."""
    return bool(value) and _UUID_PATTERN.match(value) is not None


def to_naive_utc(moment: datetime) -> datetime:
    """Convert an aware datetime to naive UTC; naive values are returned as-is."""
    if moment.tzinfo is None:
        return moment
    return moment.astimezone(timezone.utc).replace(tzinfo=None)


def as_datetime(moment: date | datetime) -> datetime:
    """Promote a calendar date to midnight; normalise datetimes to naive UTC."""
    if isinstance(moment, datetime):
        return to_naive_utc(moment)
    return datetime.combine(moment, time.min)


@dataclass(frozen=True)
class Address:
    """Street address of a building."""

    street: str
    city: str
    county: str = ""
    postal_code: str = ""
    country: str = "KE"


class ScopeKind(str, Enum):
    COMPANY = "company"
    USER = "user"


@dataclass(frozen=True)
class AccountScope:
    """Multi-tenancy key: a company account or an individual operator.

    Every fetch and every report is scoped by exactly one of these.
    """

    kind: ScopeKind
    scope_id: str

    def __post_init__(self) -> None:
        if not is_valid_scope_id(self.scope_id):
            raise InvalidScopeError(f"Invalid {self.kind.value} id: {self.scope_id!r}")

    @classmethod
    def company(cls, company_account_id: str) -> "AccountScope":
        return cls(ScopeKind.COMPANY, company_account_id)

    @classmethod
    def user(cls, user_id: str) -> "AccountScope":
        return cls(ScopeKind.USER, user_id)

    @classmethod
    def resolve(
        cls,
        company_account_id: str | None = None,
        user_id: str | None = None,
    ) -> "AccountScope":
        """Pick the company scope when present, else the individual user scope.

        Parameters
        ----------
        company_account_id : str | None
            Company account id from the session, if any.
        user_id : str | None
            Authenticated user id.

        Returns
        -------
        AccountScope
            The resolved scope.

        Raises
        ------
        InvalidScopeError
            If neither id is a valid identifier.
        """
        if company_account_id and company_account_id != "null":
            return cls.company(company_account_id)
        if user_id:
            return cls.user(user_id)
        raise InvalidScopeError("A valid company_account_id or user_id is required")

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.scope_id}"


class Granularity(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


@dataclass(frozen=True)
class DateRange:
    """Half-open time window ``[start, end)`` in naive UTC."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", as_datetime(self.start))
        object.__setattr__(self, "end", as_datetime(self.end))
        if self.start >= self.end:
            raise ValueError(f"DateRange start {self.start} must be before end {self.end}")

    @classmethod
    def last_days(cls, days: int, as_of: datetime) -> "DateRange":
        """Window of ``days`` days ending at ``as_of``."""
        end = as_datetime(as_of)
        return cls(end - timedelta(days=days), end)

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def previous(self) -> "DateRange":
        """Equally long window immediately before this one."""
        return DateRange(self.start - self.duration, self.start)

    def contains(self, moment: date | datetime | None) -> bool:
        if moment is None:
            return False
        moment = as_datetime(moment)
        return self.start <= moment < self.end

    def label(self) -> str:
        return f"{self.start.isoformat()}/{self.end.isoformat()}"
