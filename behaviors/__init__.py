"""
Risk models: turn a loan and a random stream into a realized return.
"""

from .base import RiskModel
from .static import StaticHazardModel
from .credit import CreditCorrelatedHazardModel
from .factory import build_risk_model

__all__ = [
    "RiskModel",
    "StaticHazardModel",
    "CreditCorrelatedHazardModel",
    "build_risk_model",
]
