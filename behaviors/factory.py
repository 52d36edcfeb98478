from __future__ import annotations

from typing import Union

from core.config import CreditCorrelatedHazardConfig, StaticHazardConfig

from .base import RiskModel
from .credit import CreditCorrelatedHazardModel
from .static import StaticHazardModel


def build_risk_model(
    config: Union[StaticHazardConfig, CreditCorrelatedHazardConfig],
) -> RiskModel:
    """Dispatch a tagged risk-model config to its RiskModel implementation."""
    if isinstance(config, StaticHazardConfig):
        return StaticHazardModel(config)
    if isinstance(config, CreditCorrelatedHazardConfig):
        return CreditCorrelatedHazardModel(config)
    raise TypeError(f"Unknown risk model config: {type(config).__name__}")
