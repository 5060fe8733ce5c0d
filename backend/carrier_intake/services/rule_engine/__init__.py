"""Rule engine for evaluating applicants against carrier guidelines."""

from .base import EvaluationContext, Finding, RuleEvaluator
from .carrier_table import DEFAULT_CARRIER_TABLE, load_carrier_table
from .checklist import DocumentChecklistBuilder
from .engine import CarrierEvaluation, RuleEngine
from .status import StatusResolver

__all__ = [
    "DEFAULT_CARRIER_TABLE",
    "CarrierEvaluation",
    "DocumentChecklistBuilder",
    "EvaluationContext",
    "Finding",
    "RuleEngine",
    "RuleEvaluator",
    "StatusResolver",
    "load_carrier_table",
]
