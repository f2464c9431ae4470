from enum import Enum


class InvestmentType(Enum):
    LUMPSUM = "lumpsum"
    SIP = "sip"
