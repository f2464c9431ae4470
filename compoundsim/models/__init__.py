from compoundsim.models.frequency import (
    FrequencySpec,
    NamedFrequency,
    RawFrequency,
    compound_methods,
    resolve_frequency,
)
from compoundsim.models.results import AnnualSnapshot, LumpSumResult, RegularContributionResult
