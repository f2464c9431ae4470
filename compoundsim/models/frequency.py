import logging
import numbers
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from compoundsim.enums.frequency import CompoundFrequency, DEFAULT_FREQUENCY
from compoundsim.exceptions import InvalidParameterError

logger = logging.getLogger(__name__)

_ALIASES = {
    "yearly": CompoundFrequency.YEARLY,
    "annual": CompoundFrequency.YEARLY,
    "annually": CompoundFrequency.YEARLY,
    "monthly": CompoundFrequency.MONTHLY,
    "weekly": CompoundFrequency.WEEKLY,
    "daily": CompoundFrequency.DAILY,
}


class NamedFrequency(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["named"] = "named"
    name: str = Field(description="Name of a compounding cadence, e.g. `monthly`")

    def resolve(self) -> int:
        member = _ALIASES.get(self.name.strip().lower())
        if member is None:
            logger.warning(
                "Unknown compounding frequency %r, falling back to %s",
                self.name, DEFAULT_FREQUENCY.name.lower()
            )
            member = DEFAULT_FREQUENCY
        return member.periods_per_year


class RawFrequency(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["raw"] = "raw"
    periods_per_year: int = Field(
        description="Number of compounding events per year. Checked by the calculators, not here"
    )

    def resolve(self) -> int:
        return self.periods_per_year


FrequencySpec = Annotated[Union[NamedFrequency, RawFrequency], Field(discriminator="kind")]
FrequencyLike = Union[CompoundFrequency, NamedFrequency, RawFrequency, str, int, float, None]


def to_frequency_spec(value: FrequencyLike) -> Union[CompoundFrequency, NamedFrequency, RawFrequency]:
    if value is None:
        return DEFAULT_FREQUENCY
    if isinstance(value, (CompoundFrequency, NamedFrequency, RawFrequency)):
        return value
    if isinstance(value, bool):
        raise InvalidParameterError("frequency", value, "must be a cadence name or a number of periods")
    if isinstance(value, numbers.Integral):
        return RawFrequency(periods_per_year=int(value))
    if isinstance(value, numbers.Real):
        if not float(value).is_integer():
            raise InvalidParameterError("frequency", value, "must be a whole number of periods per year")
        return RawFrequency(periods_per_year=int(value))
    if isinstance(value, str):
        try:
            return RawFrequency(periods_per_year=int(value.strip()))
        except ValueError:
            return NamedFrequency(name=value)
    raise InvalidParameterError("frequency", value, "must be a cadence name or a number of periods")


def resolve_frequency(value: FrequencyLike = None) -> int:
    """Resolve any accepted frequency form to a number of periods per year.

    Unknown names resolve to the monthly default. Zero or negative raw values
    are returned unchanged so that the calculators can reject them.
    """
    spec = to_frequency_spec(value)
    if isinstance(spec, CompoundFrequency):
        return spec.periods_per_year
    return spec.resolve()


def compound_methods() -> dict[str, dict]:
    return {
        member.name.lower(): {
            "value": member.periods_per_year,
            "label": member.label,
            "description": member.description,
            "days": member.days,
        }
        for member in CompoundFrequency
    }
