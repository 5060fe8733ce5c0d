"""Rule engine orchestrator for coordinating carrier evaluations."""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

from carrier_intake.core.enums import (
    CarrierCode,
    EligibilityStatus,
    FindingKind,
    RuleType,
    StatusModel,
)
from carrier_intake.models.domain.applicant import ApplicantRecord
from carrier_intake.models.domain.carrier import CarrierRule
from carrier_intake.services.rule_engine.base import (
    EvaluationContext,
    Finding,
    RuleEvaluator,
)
from carrier_intake.services.rule_engine.carrier_table import DEFAULT_CARRIER_TABLE
from carrier_intake.services.rule_engine.checklist import DocumentChecklistBuilder
from carrier_intake.services.rule_engine.evaluators import (
    AgeEvaluator,
    CarrierGuidelineEvaluator,
    CoverageEvaluator,
    ProductEvaluator,
    TobaccoEvaluator,
)
from carrier_intake.services.rule_engine.status import StatusResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CarrierEvaluation:
    """
    Result of evaluating one applicant against one carrier.

    Attributes:
        carrier_code: Carrier tag
        carrier_name: Carrier display name
        status: Derived eligibility status
        citations: Decline reasons with guideline references
        flags: Items requiring manual review
        underwriting_notes: Informational guidance
        document_checklist: Required documents, de-duplicated
    """

    carrier_code: CarrierCode
    carrier_name: str
    status: EligibilityStatus
    citations: tuple[str, ...]
    flags: tuple[str, ...]
    underwriting_notes: tuple[str, ...]
    document_checklist: tuple[str, ...]

    @property
    def is_eligible(self) -> bool:
        return self.status == EligibilityStatus.ELIGIBLE


class RuleEngine:
    """
    Rule engine orchestrator for coordinating carrier evaluations.

    This class:
    - Maintains a registry of rule evaluators
    - Runs the generic checks and the carrier-specific guidelines in a fixed order
    - Derives status and builds the document checklist

    The engine holds no mutable state beyond its evaluator registry and is
    safe to share across requests once built.
    """

    # Checks run for every carrier, in emission order
    RULE_ORDER = (
        RuleType.PRODUCT_AVAILABILITY,
        RuleType.INCOME_MULTIPLE,
        RuleType.MIN_COVERAGE,
        RuleType.MAX_ISSUE_AGE,
        RuleType.TOBACCO_CLASS,
        RuleType.CARRIER_GUIDELINES,
    )

    def __init__(
        self,
        carriers: Optional[Sequence[CarrierRule]] = None,
        status_model: StatusModel = StatusModel.TIERED,
    ):
        """
        Initialize the rule engine.

        Args:
            carriers: Carrier table to evaluate against; defaults to all six carriers
            status_model: How findings collapse into a status
        """
        self._carriers = tuple(carriers) if carriers is not None else DEFAULT_CARRIER_TABLE
        self._status_model = StatusModel(status_model)
        self._checklist_builder = DocumentChecklistBuilder()
        self._evaluators: Dict[RuleType, RuleEvaluator] = {}
        self._register_default_evaluators()

    def _register_default_evaluators(self):
        """Register default evaluators for all rule types."""
        self._evaluators[RuleType.PRODUCT_AVAILABILITY] = ProductEvaluator()

        # Coverage evaluators
        coverage_evaluator = CoverageEvaluator()
        self._evaluators[RuleType.INCOME_MULTIPLE] = coverage_evaluator
        self._evaluators[RuleType.MIN_COVERAGE] = coverage_evaluator

        self._evaluators[RuleType.MAX_ISSUE_AGE] = AgeEvaluator()
        self._evaluators[RuleType.TOBACCO_CLASS] = TobaccoEvaluator()
        self._evaluators[RuleType.CARRIER_GUIDELINES] = CarrierGuidelineEvaluator()

    def register_evaluator(
        self, rule_type: RuleType, evaluator: RuleEvaluator
    ) -> None:
        """
        Register a custom evaluator for a specific rule type.

        Args:
            rule_type: The rule type to handle
            evaluator: The evaluator instance
        """
        self._evaluators[rule_type] = evaluator

    @property
    def carriers(self) -> tuple[CarrierRule, ...]:
        return self._carriers

    @property
    def status_model(self) -> StatusModel:
        return self._status_model

    def get_carrier(self, code: str) -> CarrierRule:
        """
        Look up a configured carrier by code.

        Raises:
            ValueError: If the code is not in the configured table
        """
        for carrier in self._carriers:
            if carrier.code.value == code:
                return carrier
        raise ValueError(f"Unknown carrier code: {code}")

    def evaluate(self, carrier: CarrierRule, applicant: ApplicantRecord) -> CarrierEvaluation:
        """
        Evaluate an applicant against one carrier.

        Args:
            carrier: The carrier to evaluate against
            applicant: The normalized applicant

        Returns:
            CarrierEvaluation with status, findings and checklist

        Raises:
            ValueError: If no evaluator is registered for a rule type
        """
        findings: List[Finding] = []
        for rule_type in self.RULE_ORDER:
            evaluator = self._evaluators.get(rule_type)
            if evaluator is None:
                raise ValueError(f"No evaluator registered for rule type: {rule_type.value}")

            context = EvaluationContext(
                applicant=applicant,
                carrier=carrier,
                rule_type=rule_type,
            )
            findings.extend(evaluator.evaluate(context))

        status = StatusResolver.resolve(findings, self._status_model)

        logger.debug(
            f"{carrier.name}: {status.value} "
            f"({sum(1 for f in findings if f.kind == FindingKind.CITATION)} citations, "
            f"{sum(1 for f in findings if f.kind == FindingKind.FLAG)} flags)"
        )

        return CarrierEvaluation(
            carrier_code=carrier.code,
            carrier_name=carrier.name,
            status=status,
            citations=_messages(findings, FindingKind.CITATION),
            flags=_messages(findings, FindingKind.FLAG),
            underwriting_notes=_messages(findings, FindingKind.NOTE),
            document_checklist=tuple(self._checklist_builder.build(applicant, findings)),
        )

    def evaluate_all(self, applicant: ApplicantRecord) -> List[CarrierEvaluation]:
        """
        Evaluate an applicant against every configured carrier.

        Returns:
            One CarrierEvaluation per carrier, in table order
        """
        return [self.evaluate(carrier, applicant) for carrier in self._carriers]


def _messages(findings: Iterable[Finding], kind: FindingKind) -> tuple[str, ...]:
    return tuple(finding.message for finding in findings if finding.kind == kind)
