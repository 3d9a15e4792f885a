"""
Risk tier classification.

Single source of the per-parameter thresholds, shared by the reducer,
the synthetic provider (bloom risk) and the fallback generator.
"""

from typing import Optional

from ..core import constants
from ..models import ParameterKind, RiskLevel


def classify_risk(kind: ParameterKind, value: float) -> RiskLevel:
    """
    Classify a parameter value into a risk tier.

    Values below the medium threshold are low, values strictly above the high
    threshold are high, and both thresholds themselves are medium. Sea level
    is classified on its absolute value.

    Args:
        kind: Parameter kind
        value: Unrounded representative value (total for rainfall)

    Returns:
        Risk tier
    """
    medium_from, high_above = constants.RISK_THRESHOLDS[kind.value]
    if kind == ParameterKind.SEA_LEVEL:
        value = abs(value)

    if value > high_above:
        return RiskLevel.HIGH
    if value >= medium_from:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def bloom_risk(concentration: float) -> RiskLevel:
    """Bloom risk of a single chlorophyll reading; both thresholds are exclusive."""
    medium_above, high_above = constants.RISK_THRESHOLDS[ParameterKind.CHLOROPHYLL.value]
    if concentration > high_above:
        return RiskLevel.HIGH
    if concentration > medium_above:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def clamp(value: float, lower: Optional[float], upper: Optional[float]) -> float:
    """Clamp value into [lower, upper]; None leaves that side open."""
    if lower is not None and value < lower:
        return lower
    if upper is not None and value > upper:
        return upper
    return value


def round_for_display(kind: ParameterKind, value: float) -> float:
    """Round a value to the presentation precision of its parameter."""
    return round(value, constants.PRESENTATION_DECIMALS[kind.value])
