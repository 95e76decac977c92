"""Base generator class for all data generators."""

from __future__ import annotations

import random
from abc import ABC
from datetime import datetime, timedelta
from decimal import Decimal

from faker import Faker


class BaseGenerator(ABC):
    """Base class for all data generators.

    Provides common initialization: a Faker instance and a private
    ``random.Random`` so that several seeded generators can run side by
    side (for example one preview portfolio per request thread) without
    disturbing each other or the global random state.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_US``).
    """

    def __init__(self, seed: int | None = None, locale: str = "en_US") -> None:
        self.fake = Faker(locale)
        self.rng = random.Random(seed)
        if seed is not None:
            self.fake.seed_instance(seed)

    def new_id(self) -> str:
        """Random UUID4 string drawn from the generator's own state."""
        return self.fake.uuid4()

    def moment_between(self, start: datetime, end: datetime) -> datetime:
        """Uniform random second in ``[start, end)``."""
        span = max(int((end - start).total_seconds()), 1)
        return start + timedelta(seconds=self.rng.randrange(span))

    def amount(self, low: int, high: int, step: int = 1) -> Decimal:
        """Whole-currency amount between ``low`` and ``high`` in ``step`` increments."""
        return Decimal(self.rng.randrange(low, high + 1, step))
