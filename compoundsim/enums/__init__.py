from compoundsim.enums.frequency import CompoundFrequency, DEFAULT_FREQUENCY
from compoundsim.enums.investment import InvestmentType

__all__ = ["CompoundFrequency", "DEFAULT_FREQUENCY", "InvestmentType"]
