"""Coverage rule evaluator for face amount and income multiple rules."""

from typing import List

from carrier_intake.core.enums import RuleType
from carrier_intake.core.formatting import format_usd
from carrier_intake.services.rule_engine.base import (
    EvaluationContext,
    Finding,
    RuleEvaluator,
    greater_than,
    is_known,
    less_than,
)

FINANCIAL_JUSTIFICATION_DOCUMENT = (
    "Financial justification statement (assets, liabilities, estate planning needs)"
)


class CoverageEvaluator(RuleEvaluator):
    """
    Evaluator for coverage-related rules.

    Handles:
    - INCOME_MULTIPLE: coverage above income x multiple needs financial review
    - MIN_COVERAGE: coverage below the carrier minimum is declined
    """

    def evaluate(self, context: EvaluationContext) -> List[Finding]:
        """
        Evaluate coverage rules against the application context.

        Args:
            context: EvaluationContext

        Returns:
            Findings for the requested rule type

        Raises:
            ValueError: If rule type is not coverage-related
        """
        if context.rule_type == RuleType.INCOME_MULTIPLE:
            return self._evaluate_income_multiple(context)
        elif context.rule_type == RuleType.MIN_COVERAGE:
            return self._evaluate_min_coverage(context)
        else:
            raise ValueError(
                f"CoverageEvaluator cannot handle rule type: {context.rule_type.value}"
            )

    def _evaluate_income_multiple(self, context: EvaluationContext) -> List[Finding]:
        """
        Flag coverage that exceeds annual income times the carrier multiple.

        Missing or malformed income never triggers the flag.
        """
        carrier = context.carrier
        applicant = context.applicant

        if not is_known(applicant.annual_income):
            return []

        max_coverage = applicant.annual_income * carrier.income_multiple
        if not greater_than(applicant.coverage, max_coverage):
            return []

        return [
            self._flag(
                f"{carrier.cite(carrier.sections.income_multiple)}: Coverage "
                f"{format_usd(applicant.coverage)} exceeds {carrier.income_multiple}× "
                f"income cap ({format_usd(max_coverage)}). Financial justification required.",
                FINANCIAL_JUSTIFICATION_DOCUMENT,
            )
        ]

    def _evaluate_min_coverage(self, context: EvaluationContext) -> List[Finding]:
        """Decline face amounts below the carrier minimum."""
        carrier = context.carrier
        applicant = context.applicant

        if not less_than(applicant.coverage, carrier.min_coverage):
            return []

        return [
            self._cite(
                f"{carrier.cite(carrier.sections.min_coverage)}: Minimum face amount "
                f"{format_usd(carrier.min_coverage)}. Requested {format_usd(applicant.coverage)}."
            )
        ]
