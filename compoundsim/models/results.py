from pydantic import BaseModel, ConfigDict, Field, computed_field


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


def _return_rate(interest: float, invested: float) -> float:
    if invested == 0:
        return 0.0
    return interest / invested * 100


class LumpSumResult(_Record):
    principal: float = Field(ge=0, description="Amount deposited at the start")
    future_value: float = Field(ge=0, description="Value at the end of the holding period")
    annual_rate: float = Field(ge=0, description="Annual rate as a decimal fraction")
    years: float = Field(ge=0, description="Holding period (in years)")
    periods_per_year: int = Field(gt=0, description="Compounding events per year")

    @computed_field
    @property
    def total_interest(self) -> float:
        return self.future_value - self.principal

    @computed_field
    @property
    def return_rate_percent(self) -> float:
        return _return_rate(self.total_interest, self.principal)


class RegularContributionResult(_Record):
    periodic_payment: float = Field(ge=0, description="Amount contributed every month")
    total_principal: float = Field(ge=0, description="Sum of all contributions")
    future_value: float = Field(ge=0, description="Value at the end of the last month")
    annual_rate: float = Field(ge=0, description="Annual rate as a decimal fraction")
    years: float = Field(ge=0, description="Contribution period (in years)")
    periods_per_year: int = Field(gt=0, description="Compounding events per year")

    @computed_field
    @property
    def total_interest(self) -> float:
        return self.future_value - self.total_principal

    @computed_field
    @property
    def return_rate_percent(self) -> float:
        return _return_rate(self.total_interest, self.total_principal)


class AnnualSnapshot(_Record):
    year: int = Field(ge=0)
    value: float
    principal_to_date: float
    interest_to_date: float
