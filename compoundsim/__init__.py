import logging

from compoundsim.calculator import compute_lump_sum, compute_regular_contribution
from compoundsim.enums import CompoundFrequency, InvestmentType
from compoundsim.exceptions import InvalidParameterError
from compoundsim.models.frequency import NamedFrequency, RawFrequency, resolve_frequency
from compoundsim.models.results import AnnualSnapshot, LumpSumResult, RegularContributionResult
from compoundsim.series import generate_contribution_series, generate_lump_sum_series

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
