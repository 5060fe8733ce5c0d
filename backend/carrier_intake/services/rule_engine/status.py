"""Eligibility status derivation."""

from typing import Iterable

from carrier_intake.core.enums import EligibilityStatus, FindingKind, StatusModel
from carrier_intake.services.rule_engine.base import Finding


class StatusResolver:
    """
    Derive a carrier's eligibility status from its findings.

    Two models are supported:
    - TIERED: any citation is ineligible, otherwise any flag needs review,
      otherwise eligible
    - BINARY: eligible only when there are no citations and no flags

    Notes never affect status.
    """

    @staticmethod
    def resolve(findings: Iterable[Finding], model: StatusModel = StatusModel.TIERED) -> EligibilityStatus:
        kinds = {finding.kind for finding in findings}
        has_citation = FindingKind.CITATION in kinds
        has_flag = FindingKind.FLAG in kinds

        if model == StatusModel.BINARY:
            if has_citation or has_flag:
                return EligibilityStatus.INELIGIBLE
            return EligibilityStatus.ELIGIBLE

        if has_citation:
            return EligibilityStatus.INELIGIBLE
        if has_flag:
            return EligibilityStatus.NEEDS_REVIEW
        return EligibilityStatus.ELIGIBLE
