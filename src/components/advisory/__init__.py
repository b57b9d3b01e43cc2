"""
Advisory component - generated business guidance from a stats snapshot.
"""

from .component import SYSTEM_INSTRUCTION, InsightPanel, build_insight_prompt
from .models import EMPTY_MESSAGE, UNAVAILABLE_MESSAGE, AdvisoryUnavailable, InsightResult
from .ports import AdvisoryPort

__all__ = [
    "InsightPanel",
    "build_insight_prompt",
    "SYSTEM_INSTRUCTION",
    "AdvisoryUnavailable",
    "InsightResult",
    "EMPTY_MESSAGE",
    "UNAVAILABLE_MESSAGE",
    "AdvisoryPort",
]
