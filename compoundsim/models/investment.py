import logging
from typing import Optional, Union

import numpy as np
import pandas as pd
import seaborn as sns
import matplotlib.pyplot as plt
from matplotlib.ticker import FuncFormatter
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from compoundsim.calculator import compute_lump_sum, compute_regular_contribution
from compoundsim.enums.frequency import CompoundFrequency
from compoundsim.enums.investment import InvestmentType
from compoundsim.models.results import AnnualSnapshot, LumpSumResult, RegularContributionResult
from compoundsim.series import generate_contribution_series, generate_lump_sum_series

logger = logging.getLogger(__name__)

pd.set_option('display.float_format', lambda x: '%.2f' % x)

ForecastResult = Union[LumpSumResult, RegularContributionResult]

_thousands = FuncFormatter(lambda x, _: f"{round(x / 1000)}K")


class Investment(BaseModel):
    name: str = Field(description="Name of the Investment")
    investment_type: InvestmentType = Field(
        description="Type of investment. Accepts enum `InvestmentType` as input"
    )
    amount: float = Field(
        ge=0, frozen=True,
        description="Amount deposited once for LUMPSUM, or every month for SIP"
    )
    annual_rate: float = Field(
        ge=0, frozen=True,
        description="Annual rate of return as a decimal fraction (0.08 for 8%)"
    )
    time: int = Field(
        ge=0, frozen=True,
        description="Time Period (in years)"
    )
    compounding_freq: Union[CompoundFrequency, int] = Field(
        default=CompoundFrequency.MONTHLY, frozen=True,
        description="Compounding cadence, or a raw number of compounding events per year"
    )
    metadata: dict = Field(default={})

    _result: Optional[ForecastResult] = PrivateAttr(default=None)
    _series: list[AnnualSnapshot] = PrivateAttr(default_factory=list)
    _forecast_df: pd.DataFrame = PrivateAttr(default_factory=pd.DataFrame)
    _forecasted: bool = PrivateAttr(default=False)

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        extra="forbid"
    )

    @property
    def result(self) -> Optional[ForecastResult]:
        return self._result

    @property
    def series(self) -> list[AnnualSnapshot]:
        return self._series

    @property
    def acc_amount(self) -> float:
        return self._result.future_value if self._result is not None else 0.0

    @property
    def amount_invested(self) -> float:
        if self._result is None:
            return 0.0
        if isinstance(self._result, LumpSumResult):
            return self._result.principal
        return self._result.total_principal

    @property
    def total_interest(self) -> float:
        return self._result.total_interest if self._result is not None else 0.0

    @property
    def forecast_df(self) -> pd.DataFrame:
        return self._forecast_df

    def plot(self, save_path=None):
        if not self._forecasted:
            self.forecast()

        fig, axs = plt.subplots(nrows=1, ncols=2)
        fig.set_figheight(5)
        fig.set_figwidth(14)

        ax = axs[0]
        sns.lineplot(ax=ax, x="n_years", y="principal", marker='o', label="Principal", data=self.forecast_df)
        sns.lineplot(ax=ax, x="n_years", y="value", marker='o', label="Principal + Interest", data=self.forecast_df)
        ax.yaxis.set_major_formatter(_thousands)
        ax.set_xlabel("Number of Years")
        ax.set_ylabel("Total Amount")

        ax = axs[1]
        sns.scatterplot(ax=ax, x="n_years", y="interest", marker='o', data=self.forecast_df)
        sns.lineplot(ax=ax, x="n_years", y="interest", marker='o', data=self.forecast_df)
        ax.yaxis.set_major_formatter(_thousands)
        ax.set_xlabel("Number of Years")
        ax.set_ylabel("Accumulated Interest")

        fig.suptitle(self.name)
        if save_path is not None:
            fig.savefig(save_path)
        return fig

    def _compute_earnings(self) -> None:
        self._forecast_df = pd.DataFrame(
            {
                "value": [s.value for s in self.series],
                "principal": [s.principal_to_date for s in self.series],
                "interest": [s.interest_to_date for s in self.series],
            }
        )
        self._forecast_df["period_earnings"] = self._forecast_df["value"].diff().fillna(0)
        self._forecast_df.insert(0, "n_years", np.arange(len(self.series)))

    def forecast_lumpsum(self) -> LumpSumResult:
        if not self._forecasted:
            freq = self.compounding_freq
            self._result = compute_lump_sum(self.amount, self.annual_rate, self.time, freq)
            self._series = generate_lump_sum_series(self.amount, self.annual_rate, self.time, freq)
            self._compute_earnings()
            self._forecasted = True

        return self._result

    def forecast_sip(self) -> RegularContributionResult:
        if not self._forecasted:
            freq = self.compounding_freq
            self._result = compute_regular_contribution(self.amount, self.annual_rate, self.time, freq)
            self._series = generate_contribution_series(self.amount, self.annual_rate, self.time, freq)
            self._compute_earnings()
            self._forecasted = True

        return self._result

    def forecast(self) -> ForecastResult:
        logger.debug("Forecasting %s (%s)", self.name, self.investment_type.value)
        if self.investment_type == InvestmentType.LUMPSUM:
            return self.forecast_lumpsum()
        elif self.investment_type == InvestmentType.SIP:
            return self.forecast_sip()


def compare(*investments: Investment) -> pd.DataFrame:
    """Line up the yearly value of several investments, truncated to the shortest horizon."""
    if not investments:
        raise ValueError("compare() needs at least one investment")

    frames = []
    for inv in investments:
        inv.forecast()
        frames.append(inv.forecast_df.set_index("n_years")["value"].rename(inv.name))

    comparison = pd.concat(frames, axis=1, join="inner")
    comparison.index.name = "n_years"
    return comparison.reset_index()
