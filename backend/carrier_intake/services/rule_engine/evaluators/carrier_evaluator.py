"""Carrier-specific guideline evaluator.

Each carrier has its own automatic-decline conditions on top of the generic
product, coverage, age and tobacco checks. Decline conditions emit
citations; the remaining guideline items emit review flags or notes.
"""

from typing import List

from carrier_intake.core.enums import CarrierCode, RuleType
from carrier_intake.core.formatting import format_number
from carrier_intake.models.domain.applicant import ApplicantRecord
from carrier_intake.models.domain.carrier import CarrierRule
from carrier_intake.services.rule_engine.base import (
    EvaluationContext,
    Finding,
    RuleEvaluator,
    at_least,
    at_most,
    greater_than,
    is_known,
    less_than,
)


class CarrierGuidelineEvaluator(RuleEvaluator):
    """
    Evaluator for carrier-specific underwriting guidelines.

    Handles:
    - CARRIER_GUIDELINES for every CarrierCode, routed on ``carrier.code``

    Decline triggers:
    - National Life Group: DUI within 1 year, bankruptcy under 1 year,
      high-risk travel
    - Mutual of Omaha: cancer under 2 years, uncontrolled diabetes, BMI over 50
    - Ameritas: hazardous occupation, high-risk avocation
    - Lafayette Life: uncontrolled hypertension, insulin dependence
    - Transamerica: felony under 2 years
    - American Amicable: COPD, heart event under 1 year
    """

    def evaluate(self, context: EvaluationContext) -> List[Finding]:
        """
        Evaluate the carrier's own guidelines against the applicant.

        Args:
            context: EvaluationContext

        Returns:
            Citations, flags and notes in guideline order

        Raises:
            ValueError: If the rule type or carrier code is not supported
        """
        if context.rule_type != RuleType.CARRIER_GUIDELINES:
            raise ValueError(
                f"CarrierGuidelineEvaluator cannot handle rule type: {context.rule_type.value}"
            )

        code = context.carrier.code

        # Route to the carrier's guideline set
        if code == CarrierCode.NATIONAL_LIFE_GROUP:
            return self._evaluate_national_life_group(context)
        elif code == CarrierCode.MUTUAL_OF_OMAHA:
            return self._evaluate_mutual_of_omaha(context)
        elif code == CarrierCode.AMERITAS:
            return self._evaluate_ameritas(context)
        elif code == CarrierCode.LAFAYETTE_LIFE:
            return self._evaluate_lafayette_life(context)
        elif code == CarrierCode.TRANSAMERICA:
            return self._evaluate_transamerica(context)
        elif code == CarrierCode.AMERICAN_AMICABLE:
            return self._evaluate_american_amicable(context)
        else:
            raise ValueError(f"No guideline set for carrier: {code}")

    def decline_reasons(self, carrier: CarrierRule, applicant: ApplicantRecord) -> List[str]:
        """
        Return the carrier-specific automatic-decline reasons for an applicant.

        Args:
            carrier: Carrier whose decline predicate applies
            applicant: Normalized applicant

        Returns:
            One reason string per triggered decline condition
        """
        context = EvaluationContext(
            applicant=applicant,
            carrier=carrier,
            rule_type=RuleType.CARRIER_GUIDELINES,
        )
        return [finding.message for finding in self.evaluate(context) if finding.is_decline]

    def _evaluate_national_life_group(self, context: EvaluationContext) -> List[Finding]:
        """
        National Life Group Underwriting Guide.

        Declines: DUI within 12 months (§10.1), bankruptcy within 12 months
        (§10.3), high-risk travel (§11.3). Medical history, occupation and
        avocation items are routed to review; a heart attack or stent within
        12 months (§8.4) is a review flag here, not an automatic decline.
        """
        carrier = context.carrier
        applicant = context.applicant
        findings: List[Finding] = []

        # Senior underwriting band below the age ceiling - §2.1
        if at_least(applicant.age, 75) and at_most(applicant.age, carrier.max_issue_age):
            findings.append(
                self._note(
                    f"{carrier.cite('§2.1')}: Age 75-{carrier.max_issue_age} requires "
                    f"senior underwriting review."
                )
            )

        # Large face amounts - §4.3
        if at_least(applicant.coverage, 1_000_000):
            findings.append(
                self._note(
                    f"{carrier.cite('§4.3')}: Coverage ≥$1M triggers enhanced financial "
                    f"underwriting."
                )
            )

        # Cardiovascular history - §8.4
        if is_known(applicant.heart_event_years):
            if less_than(applicant.heart_event_years, 2):
                findings.append(
                    self._flag(
                        f"{carrier.cite('§8.4')}: Cardiovascular event within 24 months "
                        f"requires senior medical review.",
                        "Attending Physician Statement (APS) from cardiologist",
                        "Most recent stress test and echocardiogram results",
                    )
                )
            else:
                findings.append(
                    self._note(
                        f"{carrier.cite('§8.4')}: Cardiovascular history >24 months → "
                        f"standard underwriting with APS.",
                        "Attending Physician Statement (APS) from treating cardiologist",
                    )
                )

        # Cancer history - §8.6
        if is_known(applicant.cancer_history_years):
            if less_than(applicant.cancer_history_years, 2):
                findings.append(
                    self._flag(
                        f"{carrier.cite('§8.6')}: Cancer treatment within 24 months "
                        f"requires oncology review.",
                        "Oncology records (pathology, staging, treatment protocol)",
                        "Most recent follow-up and surveillance imaging",
                    )
                )
            else:
                findings.append(
                    self._note(
                        f"{carrier.cite('§8.6')}: Cancer history >24 months → case-by-case "
                        f"review based on type/stage.",
                        "Cancer history questionnaire",
                        "Attending Physician Statement (APS) from oncologist",
                    )
                )

        # Diabetes - §8.2
        if applicant.uncontrolled_diabetes:
            findings.append(
                self._flag(
                    f"{carrier.cite('§8.2')}: Uncontrolled diabetes requires medical "
                    f"review and HbA1c verification.",
                    "Last 12 months HbA1c results",
                    "Diabetes management questionnaire",
                )
            )
        if applicant.insulin_dependent:
            findings.append(
                self._note(
                    f"{carrier.cite('§8.2')}: Insulin-dependent diabetes → rated or "
                    f"declined based on control and complications.",
                    "Endocrinologist APS",
                )
            )

        # Hypertension - §8.3
        if applicant.uncontrolled_hypertension:
            findings.append(
                self._flag(
                    f"{carrier.cite('§8.3')}: Uncontrolled hypertension requires blood "
                    f"pressure readings and medication compliance verification.",
                    "Last 3 blood pressure readings",
                )
            )

        # COPD - §8.5
        if applicant.copd:
            findings.append(
                self._flag(
                    f"{carrier.cite('§8.5')}: COPD requires pulmonary function testing "
                    f"and severity assessment.",
                    "Pulmonary function test (PFT) results",
                    "Pulmonologist APS",
                )
            )

        # Legal/financial history - §10.1-10.3
        if at_most(applicant.dui_years, 1):
            findings.append(
                self._cite(
                    f"{carrier.cite('§10.1')}: DUI within 12 months → automatic decline."
                )
            )
        elif less_than(applicant.dui_years, 3):
            findings.append(
                self._flag(
                    f"{carrier.cite('§10.1')}: DUI within 36 months requires risk assessment."
                )
            )

        if less_than(applicant.felony_years, 2):
            findings.append(
                self._flag(
                    f"{carrier.cite('§10.2')}: Felony conviction within 24 months "
                    f"requires legal review."
                )
            )

        if less_than(applicant.bankruptcy_years, 1):
            findings.append(
                self._cite(
                    f"{carrier.cite('§10.3')}: Bankruptcy within 12 months → automatic decline."
                )
            )

        # Occupation/avocation/travel - §11.1-11.3
        if applicant.hazardous_occupation:
            findings.append(
                self._flag(
                    f"{carrier.cite('§11.1')}: Hazardous occupation requires occupational "
                    f"questionnaire and rating assessment."
                )
            )

        if applicant.avocation_risk:
            findings.append(
                self._flag(
                    f"{carrier.cite('§11.2')}: High-risk avocation (aviation, diving, "
                    f"climbing) requires avocation questionnaire."
                )
            )

        if applicant.travel_high_risk:
            findings.append(
                self._cite(
                    f"{carrier.cite('§11.3')}: High-risk foreign travel → automatic decline."
                )
            )

        # Disclosures - §7.1-7.2
        if applicant.medications:
            findings.append(
                self._note(
                    f"{carrier.cite('§7.1')}: All medications subject to underwriting "
                    f"review for underlying conditions."
                )
            )
        if applicant.doctor_names:
            findings.append(
                self._note(
                    f"{carrier.cite('§7.2')}: Physician disclosure triggers APS request "
                    f"for medical history verification."
                )
            )

        return findings

    def _evaluate_mutual_of_omaha(self, context: EvaluationContext) -> List[Finding]:
        """
        Mutual of Omaha Underwriting Manual.

        Declines: BMI over 50 (§5.3), cancer treatment within 24 months
        (§6.4), uncontrolled diabetes (§6.2). MI/stent within 12 months
        (§6.3) goes to cardiology review instead of declining; American
        Amicable is the only carrier that declines a recent heart event.
        """
        carrier = context.carrier
        applicant = context.applicant
        findings: List[Finding] = []

        # Build - §5.3
        if greater_than(applicant.bmi, 50):
            findings.append(
                self._cite(
                    f"{carrier.cite('§5.3')}: BMI {format_number(applicant.bmi)} exceeds "
                    f"maximum (50). Automatic decline."
                )
            )
        elif greater_than(applicant.bmi, 40):
            findings.append(
                self._flag(
                    f"{carrier.cite('§5.3')}: BMI {format_number(applicant.bmi)} requires "
                    f"obesity assessment and comorbidity review.",
                    "Weight history and management plan",
                )
            )

        # Cancer - §6.4
        if less_than(applicant.cancer_history_years, 2):
            findings.append(
                self._cite(
                    f"{carrier.cite('§6.4')}: Cancer treatment within 24 months → "
                    f"automatic decline."
                )
            )
        elif less_than(applicant.cancer_history_years, 5):
            findings.append(
                self._flag(
                    f"{carrier.cite('§6.4')}: Cancer history 2-5 years requires oncology "
                    f"review and staging verification.",
                    "Oncology APS with pathology and staging",
                )
            )
        elif is_known(applicant.cancer_history_years):
            findings.append(
                self._note(
                    f"{carrier.cite('§6.4')}: Cancer history >5 years → standard "
                    f"underwriting with medical records.",
                    "Cancer treatment summary",
                )
            )

        # Diabetes - §6.2
        if applicant.uncontrolled_diabetes:
            findings.append(
                self._cite(
                    f"{carrier.cite('§6.2')}: Uncontrolled diabetes (HbA1c >9.0 or "
                    f"unstable) → decline."
                )
            )
        if applicant.insulin_dependent:
            findings.append(
                self._note(
                    f"{carrier.cite('§6.2')}: Insulin-dependent diabetes requires "
                    f"endocrinology review.",
                    "Diabetes control records (HbA1c, glucose logs)",
                )
            )

        # Cardiovascular - §6.3
        if less_than(applicant.heart_event_years, 1):
            findings.append(
                self._flag(
                    f"{carrier.cite('§6.3')}: MI/stent within 12 months requires "
                    f"cardiology review.",
                    "Cardiology APS",
                )
            )

        # COPD - §6.5
        if applicant.copd:
            findings.append(
                self._flag(
                    f"{carrier.cite('§6.5')}: COPD requires PFT and severity grading.",
                    "Pulmonary function test (PFT) results",
                )
            )

        return findings

    def _evaluate_ameritas(self, context: EvaluationContext) -> List[Finding]:
        """Ameritas UW Guide. Declines: hazardous occupation (§9.1), avocation (§9.2)."""
        carrier = context.carrier
        applicant = context.applicant
        findings: List[Finding] = []

        if applicant.hazardous_occupation:
            findings.append(
                self._cite(
                    f"{carrier.cite('§9.1')}: Hazardous occupation → decline per "
                    f"occupational class guidelines."
                )
            )

        if applicant.avocation_risk:
            findings.append(
                self._cite(
                    f"{carrier.cite('§9.2')}: High-risk avocation (pilot, scuba, "
                    f"mountaineering) → decline."
                )
            )

        return findings

    def _evaluate_lafayette_life(self, context: EvaluationContext) -> List[Finding]:
        """Lafayette UW Manual. Declines: uncontrolled hypertension (§7.2), insulin (§7.3)."""
        carrier = context.carrier
        applicant = context.applicant
        findings: List[Finding] = []

        if applicant.uncontrolled_hypertension:
            findings.append(
                self._cite(
                    f"{carrier.cite('§7.2')}: Uncontrolled hypertension → decline."
                )
            )

        if applicant.insulin_dependent:
            findings.append(
                self._cite(
                    f"{carrier.cite('§7.3')}: Insulin-dependent diabetes → decline per "
                    f"program-specific restrictions."
                )
            )

        return findings

    def _evaluate_transamerica(self, context: EvaluationContext) -> List[Finding]:
        """Transamerica UW Guide. Declines: felony within 24 months (§10.1)."""
        carrier = context.carrier
        applicant = context.applicant

        if less_than(applicant.felony_years, 2):
            return [
                self._cite(
                    f"{carrier.cite('§10.1')}: Felony conviction within 24 months → decline."
                )
            ]
        return []

    def _evaluate_american_amicable(self, context: EvaluationContext) -> List[Finding]:
        """
        American Amicable UW Manual.

        Declines: COPD (§8.3), heart attack/stent within 12 months (§8.1).
        A cardiovascular event within 24 months is routed to cardiology review.
        """
        carrier = context.carrier
        applicant = context.applicant
        findings: List[Finding] = []

        if applicant.copd:
            findings.append(
                self._cite(
                    f"{carrier.cite('§8.3')}: COPD diagnosis → decline per simplified "
                    f"issue guidelines."
                )
            )

        if less_than(applicant.heart_event_years, 1):
            findings.append(
                self._cite(
                    f"{carrier.cite('§8.1')}: Heart attack/stent within 12 months → decline."
                )
            )
        elif less_than(applicant.heart_event_years, 2):
            findings.append(
                self._flag(
                    f"{carrier.cite('§8.1')}: Cardiovascular event within 24 months "
                    f"requires cardiology review.",
                    "Cardiology APS and recent test results",
                )
            )

        return findings
