"""
Input records for the presentation layer.

These sit between raw user input and the compounding engine: they fill in
missing or unparsable fields from the settings defaults, hold the rate as a
whole percent the way users type it, and convert it to the decimal fraction
the engine expects.
"""
import math
import logging
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from compoundsim.calculator import compute_lump_sum, compute_regular_contribution
from compoundsim.config import Settings, get_settings
from compoundsim.enums.frequency import CompoundFrequency
from compoundsim.models.frequency import FrequencySpec, NamedFrequency, RawFrequency, to_frequency_spec
from compoundsim.models.results import AnnualSnapshot, LumpSumResult, RegularContributionResult
from compoundsim.series import generate_contribution_series, generate_lump_sum_series

logger = logging.getLogger(__name__)


def _lenient_float(field: str, raw: Any, default: float) -> float:
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return default
    try:
        value = float(raw)
    except (TypeError, ValueError):
        logger.info("Could not parse %s=%r, using default %s", field, raw, default)
        return default
    if math.isnan(value):
        return default
    return value


def _lenient_int(field: str, raw: Any, default: int) -> int:
    value = _lenient_float(field, raw, default)
    if not math.isfinite(value):
        return default
    return int(value)


def _frequency_or_default(raw: Any, settings: Settings) -> Union[NamedFrequency, RawFrequency]:
    if raw is None or raw == "":
        raw = settings.default_frequency
    spec = to_frequency_spec(raw)
    if isinstance(spec, CompoundFrequency):
        return RawFrequency(periods_per_year=spec.periods_per_year)
    return spec


class _Inputs(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    rate_percent: float = Field(description="Annual rate in whole percent, e.g. 8 for 8%")
    years: int = Field(description="Investment period (in years)")
    frequency: FrequencySpec = Field(
        default=RawFrequency(periods_per_year=12),
        description="Compounding cadence, named or as a raw number of periods per year"
    )

    @property
    def rate_decimal(self) -> float:
        return self.rate_percent / 100


class LumpSumInputs(_Inputs):
    principal: float = Field(description="Amount deposited at the start")

    @classmethod
    def from_raw(cls, principal: Any = None, rate: Any = None, years: Any = None, frequency: Any = None,
                 settings: Optional[Settings] = None) -> "LumpSumInputs":
        settings = settings or get_settings()
        return cls(
            principal=_lenient_float("principal", principal, settings.default_principal),
            rate_percent=_lenient_float("rate", rate, settings.default_rate_percent),
            years=_lenient_int("years", years, settings.default_years),
            frequency=_frequency_or_default(frequency, settings),
        )

    def compute(self) -> LumpSumResult:
        return compute_lump_sum(self.principal, self.rate_decimal, self.years, self.frequency)

    def series(self) -> list[AnnualSnapshot]:
        return generate_lump_sum_series(self.principal, self.rate_decimal, self.years, self.frequency)


class RegularContributionInputs(_Inputs):
    monthly_payment: float = Field(description="Amount contributed every month")

    @classmethod
    def from_raw(cls, monthly_payment: Any = None, rate: Any = None, years: Any = None, frequency: Any = None,
                 settings: Optional[Settings] = None) -> "RegularContributionInputs":
        settings = settings or get_settings()
        return cls(
            monthly_payment=_lenient_float("monthly_payment", monthly_payment, settings.default_monthly_payment),
            rate_percent=_lenient_float("rate", rate, settings.default_rate_percent),
            years=_lenient_int("years", years, settings.default_years),
            frequency=_frequency_or_default(frequency, settings),
        )

    def compute(self) -> RegularContributionResult:
        return compute_regular_contribution(self.monthly_payment, self.rate_decimal, self.years, self.frequency)

    def series(self) -> list[AnnualSnapshot]:
        return generate_contribution_series(self.monthly_payment, self.rate_decimal, self.years, self.frequency)
