"""
Simulation configuration.

SimulationConfig holds the Monte Carlo run settings. The risk-model
parameter sets are pydantic models forming a tagged union on ``kind`` so a
sweep can be written to / read from JSON and inspected without running it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


@dataclass(frozen=True)
class SimulationConfig:
    trial_count: int = 1000
    seed: Optional[int] = None  # None -> fresh OS entropy, not reproducible

    # Trials are split across this many independent random streams. Results
    # depend on (seed, n_streams) only, never on max_workers.
    n_streams: int = 16
    max_workers: Optional[int] = None

    def __post_init__(self) -> None:
        if self.trial_count <= 0:
            raise ValueError(f"trial_count must be positive, got {self.trial_count}")
        if self.n_streams <= 0:
            raise ValueError(f"n_streams must be positive, got {self.n_streams}")
        if self.max_workers is not None and self.max_workers <= 0:
            raise ValueError(f"max_workers must be positive, got {self.max_workers}")
        if self.seed is not None and self.seed < 0:
            raise ValueError(f"seed must be non-negative, got {self.seed}")


class StaticHazardConfig(BaseModel):
    """
    Pre-crisis model: constant foreclosure hazard, home prices on a fixed
    trend regardless of borrower.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["static"] = "static"
    annual_foreclosure_rate: float = Field(ge=0)
    annual_appreciation_rate: float
    distress_sale_rate: float = Field(ge=0)

    @property
    def model_parameter(self) -> float:
        return self.annual_foreclosure_rate


class CreditCorrelatedHazardConfig(BaseModel):
    """
    Realistic model: hazard shifted by borrower credit score, home prices
    follow a monthly random walk.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["credit_correlated"] = "credit_correlated"
    base_annual_foreclosure_rate: float = Field(ge=0)
    distress_sale_rate: float = Field(ge=0)

    @property
    def model_parameter(self) -> float:
        return self.base_annual_foreclosure_rate


RiskModelConfig = Annotated[
    Union[StaticHazardConfig, CreditCorrelatedHazardConfig],
    Field(discriminator="kind"),
]

_RISK_MODEL_ADAPTER: TypeAdapter = TypeAdapter(RiskModelConfig)


def parse_risk_model_config(data: Dict[str, Any]) -> Union[StaticHazardConfig, CreditCorrelatedHazardConfig]:
    """Build the right config variant from a plain dict (e.g. parsed JSON)."""
    return _RISK_MODEL_ADAPTER.validate_python(data)
