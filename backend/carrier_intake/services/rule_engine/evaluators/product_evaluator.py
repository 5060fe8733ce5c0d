"""Product availability evaluator."""

from typing import List

from carrier_intake.core.enums import RuleType
from carrier_intake.services.rule_engine.base import (
    EvaluationContext,
    Finding,
    RuleEvaluator,
)


class ProductEvaluator(RuleEvaluator):
    """
    Evaluator for the carrier's product matrix.

    Handles:
    - PRODUCT_AVAILABILITY: requested product must be offered by the carrier

    Unknown or missing product types are not offered by any carrier.
    """

    def evaluate(self, context: EvaluationContext) -> List[Finding]:
        if context.rule_type != RuleType.PRODUCT_AVAILABILITY:
            raise ValueError(
                f"ProductEvaluator cannot handle rule type: {context.rule_type.value}"
            )

        carrier = context.carrier
        applicant = context.applicant

        if carrier.offers(applicant.product_type):
            return []

        return [
            self._cite(
                f"{carrier.product_guide}: {applicant.product_label} not offered by "
                f"{carrier.name}. {carrier.name} offers {carrier.products_label} only."
            )
        ]
