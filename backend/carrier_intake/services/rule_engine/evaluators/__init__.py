"""Rule evaluators for generic and carrier-specific checks."""

from .age_evaluator import AgeEvaluator
from .carrier_evaluator import CarrierGuidelineEvaluator
from .coverage_evaluator import CoverageEvaluator
from .product_evaluator import ProductEvaluator
from .tobacco_evaluator import TobaccoEvaluator

__all__ = [
    "AgeEvaluator",
    "CarrierGuidelineEvaluator",
    "CoverageEvaluator",
    "ProductEvaluator",
    "TobaccoEvaluator",
]
