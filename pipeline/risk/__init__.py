"""Risk classification and evacuation status modules."""

from .classifier import classify_risk, select_tier, RECOMMENDATIONS, NO_ACTIVITY_RECOMMENDATIONS
from .evacuation import derive_evacuation_status

__all__ = ['classify_risk', 'select_tier', 'RECOMMENDATIONS',
           'NO_ACTIVITY_RECOMMENDATIONS', 'derive_evacuation_status']
