"""Historical exchange rates keyed by ISO date, with nearest-earlier lookup."""

from __future__ import annotations

import bisect
from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Record:
    """A date paired with a numeric value (a rate or an amount)."""

    date: str
    value: float


class DateOutOfRangeError(LookupError):
    """Raised when a date precedes every date in the rate table."""

    def __init__(self, date: str) -> None:
        super().__init__(f"date not in database range: {date}")
        self.date = date


class ExchangeRates:
    """Rates ordered by date; a lookup falls back to the closest earlier date."""

    def __init__(self, records: Iterable[Record] = ()) -> None:
        self._rates: dict[str, float] = {}
        self._dates: list[str] = []
        for record in records:
            self.add(record)

    def add(self, record: Record) -> None:
        """Store a rate, replacing any rate already held for the same date."""
        if record.date not in self._rates:
            bisect.insort(self._dates, record.date)
        self._rates[record.date] = record.value

    def rate_on(self, date: str) -> float:
        """Return the rate for ``date`` or, failing that, the closest earlier one."""
        index = bisect.bisect_right(self._dates, date)
        if index == 0:
            raise DateOutOfRangeError(date)
        return self._rates[self._dates[index - 1]]

    def convert(self, record: Record) -> float:
        """Multiply the record's amount by the rate in force on its date."""
        return record.value * self.rate_on(record.date)

    def dump(self) -> str:
        """Render the table as ``date, rate`` lines followed by a blank line."""
        lines = "".join(f"{date}, {self._rates[date]:.2f}\n" for date in self._dates)
        return lines + "\n"

    def __len__(self) -> int:
        return len(self._dates)