"""Tobacco rate class evaluator."""

from typing import List

from carrier_intake.core.enums import RuleType
from carrier_intake.services.rule_engine.base import (
    EvaluationContext,
    Finding,
    RuleEvaluator,
    is_known,
)

TOBACCO_QUESTIONNAIRE = "Tobacco questionnaire (type, frequency, cessation date)"


class TobaccoEvaluator(RuleEvaluator):
    """
    Evaluator for tobacco rate classification.

    Handles:
    - TOBACCO_CLASS: classify disclosed tobacco use against the carrier's
      lookback window

    Classification never affects eligibility. When years since last use is
    missing or malformed the evaluator asks for clarification instead of
    classifying.
    """

    def evaluate(self, context: EvaluationContext) -> List[Finding]:
        if context.rule_type != RuleType.TOBACCO_CLASS:
            raise ValueError(
                f"TobaccoEvaluator cannot handle rule type: {context.rule_type.value}"
            )

        carrier = context.carrier
        applicant = context.applicant

        if not applicant.tobacco_use:
            return []

        citation = carrier.cite(carrier.sections.tobacco)
        lookback_months = carrier.tobacco_lookback_years * 12

        if not is_known(applicant.tobacco_years):
            return [
                self._flag(
                    f"{citation}: Further clarification required - years since last "
                    f"tobacco use not specified."
                )
            ]

        if applicant.tobacco_years < carrier.tobacco_lookback_years:
            return [
                self._note(
                    f"{citation}: Tobacco use within {lookback_months} months → "
                    f"Tobacco rate class.",
                    TOBACCO_QUESTIONNAIRE,
                )
            ]

        return [
            self._note(
                f"{citation}: Tobacco-free {lookback_months}+ months → "
                f"Non-Tobacco rate class eligible."
            )
        ]
