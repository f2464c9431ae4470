"""
Year-by-year snapshots of both strategies, for charting.

Both generators replay the same rules as `compoundsim.calculator`, so the
last snapshot always agrees with the matching calculator result.
"""
import logging

from compoundsim.calculator import (
    MONTHS_PER_YEAR,
    contribution_balances,
    lump_sum_value,
    total_months,
    validate_parameters,
)
from compoundsim.enums.frequency import DEFAULT_FREQUENCY
from compoundsim.exceptions import InvalidParameterError
from compoundsim.models.frequency import FrequencyLike
from compoundsim.models.results import AnnualSnapshot

logger = logging.getLogger(__name__)


def _whole_years(years: float) -> int:
    if years != int(years):
        raise InvalidParameterError("years", years, "must be a whole number of years for an annual series")
    return int(years)


def generate_lump_sum_series(principal: float, annual_rate: float, years: int,
                             frequency: FrequencyLike = DEFAULT_FREQUENCY) -> list[AnnualSnapshot]:
    periods_per_year = validate_parameters("principal", principal, annual_rate, years, frequency)
    n_years = _whole_years(years)

    series = []
    for year in range(n_years + 1):
        value = lump_sum_value(principal, annual_rate, year, periods_per_year)
        series.append(
            AnnualSnapshot(
                year=year,
                value=value,
                principal_to_date=principal,
                interest_to_date=value - principal,
            )
        )

    logger.debug("Generated %d lump sum snapshots", len(series))
    return series


def generate_contribution_series(periodic_payment: float, annual_rate: float, years: int,
                                 frequency: FrequencyLike = DEFAULT_FREQUENCY) -> list[AnnualSnapshot]:
    periods_per_year = validate_parameters("periodic_payment", periodic_payment, annual_rate, years, frequency)
    n_years = _whole_years(years)

    series = [AnnualSnapshot(year=0, value=0.0, principal_to_date=0.0, interest_to_date=0.0)]
    balances = contribution_balances(periodic_payment, annual_rate, periods_per_year, total_months(n_years))
    for month, balance in enumerate(balances, start=1):
        if month % MONTHS_PER_YEAR:
            continue
        year = month // MONTHS_PER_YEAR
        principal = periodic_payment * MONTHS_PER_YEAR * year
        series.append(
            AnnualSnapshot(
                year=year,
                value=balance,
                principal_to_date=principal,
                interest_to_date=balance - principal,
            )
        )

    logger.debug("Generated %d contribution snapshots", len(series))
    return series
