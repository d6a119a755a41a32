"""Mapping from risk tier to the user-facing evacuation status."""

from typing import Optional

from ..models import EvacuationStatus, RiskAssessment, RiskTier

TIER_TO_STATUS = {
    RiskTier.EXTREME: EvacuationStatus.EVACUATE_NOW,
    RiskTier.VERY_HIGH: EvacuationStatus.WARNING,
    RiskTier.HIGH: EvacuationStatus.MONITOR,
    RiskTier.MODERATE: EvacuationStatus.MONITOR,
    RiskTier.LOW: EvacuationStatus.SAFE,
    RiskTier.VERY_LOW: EvacuationStatus.SAFE,
}


def derive_evacuation_status(assessment: Optional[RiskAssessment]) -> EvacuationStatus:
    """Status for an assessment, or UNKNOWN when there is none."""
    if assessment is None:
        return EvacuationStatus.UNKNOWN
    return TIER_TO_STATUS[assessment.tier]
