"""Issue age rule evaluator."""

from typing import List

from carrier_intake.core.enums import RuleType
from carrier_intake.core.formatting import format_number
from carrier_intake.services.rule_engine.base import (
    EvaluationContext,
    Finding,
    RuleEvaluator,
    greater_than,
)


class AgeEvaluator(RuleEvaluator):
    """
    Evaluator for issue age limits.

    Handles:
    - MAX_ISSUE_AGE: applicants older than the carrier's maximum are declined
    """

    def evaluate(self, context: EvaluationContext) -> List[Finding]:
        if context.rule_type != RuleType.MAX_ISSUE_AGE:
            raise ValueError(
                f"AgeEvaluator cannot handle rule type: {context.rule_type.value}"
            )

        carrier = context.carrier
        age = context.applicant.age

        if not greater_than(age, carrier.max_issue_age):
            return []

        return [
            self._cite(
                f"{carrier.cite(carrier.sections.max_issue_age)}: Maximum issue age "
                f"{carrier.max_issue_age}. Applicant age {format_number(age)} exceeds limit."
            )
        ]
