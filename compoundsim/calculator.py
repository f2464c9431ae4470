"""
Compounding engine for the two supported strategies.

Rates are decimal fractions everywhere in this module (0.08 for 8%).
Converting a whole-percent rate is the caller's job, see
`compoundsim.models.inputs`.
"""
import math
import numbers
import logging
from typing import Iterator

from compoundsim.enums.frequency import DEFAULT_FREQUENCY
from compoundsim.exceptions import InvalidParameterError
from compoundsim.models.frequency import FrequencyLike, resolve_frequency
from compoundsim.models.results import LumpSumResult, RegularContributionResult

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


def _check_non_negative(field: str, value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameterError(field, value, "must be a number")
    if not math.isfinite(value):
        raise InvalidParameterError(field, value, "must be a finite number")
    if value < 0:
        raise InvalidParameterError(field, value, "must not be negative")


def _check_frequency(periods_per_year: int) -> None:
    if periods_per_year <= 0:
        raise InvalidParameterError("frequency", periods_per_year, "must be a positive number of periods per year")


def validate_parameters(amount_field: str, amount: float, annual_rate: float, years: float,
                        frequency: FrequencyLike) -> int:
    """Check the shared preconditions and return the resolved periods per year."""
    _check_non_negative(amount_field, amount)
    _check_non_negative("annual_rate", annual_rate)
    _check_non_negative("years", years)
    periods_per_year = resolve_frequency(frequency)
    _check_frequency(periods_per_year)
    return periods_per_year


def total_months(years: float) -> int:
    months = years * MONTHS_PER_YEAR
    if months != int(months):
        raise InvalidParameterError("years", years, "must cover a whole number of months")
    return int(months)


def lump_sum_value(principal: float, annual_rate: float, years: float, periods_per_year: int) -> float:
    if annual_rate == 0 or years == 0:
        return float(principal)
    try:
        growth = (1 + annual_rate / periods_per_year) ** (periods_per_year * years)
    except OverflowError:
        # past the float range, same as the contribution simulation
        return 0.0 if principal == 0 else math.inf
    return principal * growth


def contribution_balances(periodic_payment: float, annual_rate: float, periods_per_year: int,
                          months: int) -> Iterator[float]:
    """Yield the balance at the end of each month, month 1 first.

    Each month the payment is deposited first, then every compounding period
    that has come due by the end of that month is applied. A period is due
    once floor(month / 12 * periods_per_year) has reached it, which spreads
    any number of yearly compounding events over the calendar months.
    """
    period_growth = 1 + annual_rate / periods_per_year
    balance = 0.0
    applied_periods = 0
    for month in range(1, months + 1):
        balance += periodic_payment
        # floor(month / 12 * periods_per_year), kept in integers
        expected_periods = month * periods_per_year // MONTHS_PER_YEAR
        if expected_periods > applied_periods:
            for _ in range(expected_periods - applied_periods):
                balance *= period_growth
            applied_periods = expected_periods
        yield balance


def _annuity_due(periodic_payment: float, monthly_rate: float, months: int) -> float:
    growth = 1 + monthly_rate
    return periodic_payment * growth * (growth ** months - 1) / monthly_rate


def compute_lump_sum(principal: float, annual_rate: float, years: float,
                     frequency: FrequencyLike = DEFAULT_FREQUENCY) -> LumpSumResult:
    periods_per_year = validate_parameters("principal", principal, annual_rate, years, frequency)
    logger.debug(
        "Lump sum: principal=%s rate=%s years=%s periods_per_year=%s",
        principal, annual_rate, years, periods_per_year
    )
    future_value = lump_sum_value(principal, annual_rate, years, periods_per_year)
    return LumpSumResult(
        principal=principal,
        future_value=future_value,
        annual_rate=annual_rate,
        years=years,
        periods_per_year=periods_per_year,
    )


def compute_regular_contribution(periodic_payment: float, annual_rate: float, years: float,
                                 frequency: FrequencyLike = DEFAULT_FREQUENCY) -> RegularContributionResult:
    periods_per_year = validate_parameters("periodic_payment", periodic_payment, annual_rate, years, frequency)
    months = total_months(years)
    logger.debug(
        "Regular contribution: payment=%s rate=%s months=%s periods_per_year=%s",
        periodic_payment, annual_rate, months, periods_per_year
    )

    future_value = None
    if periods_per_year == MONTHS_PER_YEAR and annual_rate > 0 and months > 0:
        # Compounding lines up with the deposits, so the annuity-due sum is exact
        try:
            future_value = _annuity_due(periodic_payment, annual_rate / MONTHS_PER_YEAR, months)
        except OverflowError:
            logger.debug("Annuity shortcut overflowed, simulating month by month")
    if future_value is None:
        balances = list(contribution_balances(periodic_payment, annual_rate, periods_per_year, months))
        future_value = balances[-1] if balances else 0.0

    return RegularContributionResult(
        periodic_payment=periodic_payment,
        total_principal=periodic_payment * MONTHS_PER_YEAR * years,
        future_value=future_value,
        annual_rate=annual_rate,
        years=years,
        periods_per_year=periods_per_year,
    )
