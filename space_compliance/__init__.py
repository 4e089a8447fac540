"""
Space Compliance Engine — regulatory applicability and compliance scoring
for space operators (EU Space Act, NIS2, national space laws).

    from space_compliance import OperatorProfile, UnifiedAssessor
    result = UnifiedAssessor().aggregate(OperatorProfile(establishment_country="DE"))
"""

from space_compliance.models.profile import OperatorProfile
from space_compliance.orchestration.aggregator import UnifiedAssessor

__version__ = "0.1.0"

__all__ = ["OperatorProfile", "UnifiedAssessor", "__version__"]
