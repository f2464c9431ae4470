from enum import Enum


class CompoundFrequency(Enum):
    YEARLY = 1
    MONTHLY = 12
    WEEKLY = 52
    DAILY = 365

    @property
    def periods_per_year(self) -> int:
        return self.value

    @property
    def label(self) -> str:
        return _DETAILS[self][0]

    @property
    def description(self) -> str:
        return _DETAILS[self][1]

    @property
    def days(self) -> int:
        """Approximate number of days between two compounding events."""
        return _DETAILS[self][2]


_DETAILS = {
    CompoundFrequency.YEARLY: ("Yearly", "Interest is credited once a year", 365),
    CompoundFrequency.MONTHLY: ("Monthly", "Interest is credited every month", 30),
    CompoundFrequency.WEEKLY: ("Weekly", "Interest is credited every week", 7),
    CompoundFrequency.DAILY: ("Daily", "Interest is credited every day", 1),
}

DEFAULT_FREQUENCY = CompoundFrequency.MONTHLY
