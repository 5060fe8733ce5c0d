"""Rule engine foundation with evaluation context, findings, and base evaluator."""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from carrier_intake.core.enums import FindingKind, RuleType
from carrier_intake.models.domain.applicant import ApplicantRecord
from carrier_intake.models.domain.carrier import CarrierRule


@dataclass(frozen=True)
class EvaluationContext:
    """
    Evaluation context passed to rule evaluators.

    Attributes:
        applicant: The normalized applicant being evaluated
        carrier: The carrier whose guidelines apply
        rule_type: The check being run
    """

    applicant: ApplicantRecord
    carrier: CarrierRule
    rule_type: RuleType


@dataclass(frozen=True)
class Finding:
    """
    One item emitted by an evaluator.

    Attributes:
        kind: Citation (decline), flag (manual review) or note (informational)
        message: Human-readable explanation with the guideline reference
        documents: Documents the finding adds to the checklist
    """

    kind: FindingKind
    message: str
    documents: tuple[str, ...] = ()

    @property
    def is_decline(self) -> bool:
        return self.kind == FindingKind.CITATION


def is_known(value: Optional[float]) -> bool:
    """A numeric field is known when it was provided and parsed."""
    return value is not None and not math.isnan(value)


def greater_than(value: Optional[float], limit: float) -> bool:
    """NaN- and None-safe ``value > limit``."""
    return is_known(value) and is_known(limit) and value > limit


def less_than(value: Optional[float], limit: float) -> bool:
    """NaN- and None-safe ``value < limit``."""
    return is_known(value) and is_known(limit) and value < limit


def at_most(value: Optional[float], limit: float) -> bool:
    """NaN- and None-safe ``value <= limit``."""
    return is_known(value) and is_known(limit) and value <= limit


def at_least(value: Optional[float], limit: float) -> bool:
    """NaN- and None-safe ``value >= limit``."""
    return is_known(value) and is_known(limit) and value >= limit


class RuleEvaluator(ABC):
    """
    Abstract base class for rule evaluators using the Strategy pattern.

    Each concrete evaluator implements one family of checks (product
    availability, coverage, age, tobacco, carrier guidelines) and returns
    the findings it produces for a carrier/applicant pair. Evaluators are
    stateless and must not mutate the context.
    """

    @abstractmethod
    def evaluate(self, context: EvaluationContext) -> List[Finding]:
        """
        Evaluate a check against the provided context.

        Args:
            context: EvaluationContext with applicant, carrier and rule type

        Returns:
            Findings in emission order; empty if nothing triggered

        Raises:
            ValueError: If the evaluator cannot handle the rule type
        """
        pass

    @staticmethod
    def _cite(message: str, *documents: str) -> Finding:
        """Build a decline citation."""
        return Finding(FindingKind.CITATION, message, tuple(documents))

    @staticmethod
    def _flag(message: str, *documents: str) -> Finding:
        """Build a manual-review flag."""
        return Finding(FindingKind.FLAG, message, tuple(documents))

    @staticmethod
    def _note(message: str, *documents: str) -> Finding:
        """Build an informational underwriting note."""
        return Finding(FindingKind.NOTE, message, tuple(documents))
