"""Required-document checklist construction."""

from typing import Iterable, List

from carrier_intake.core.enums import ProductType
from carrier_intake.models.domain.applicant import ApplicantRecord
from carrier_intake.services.rule_engine.base import Finding, at_least

BASELINE_DOCUMENTS = (
    "Government-issued photo ID (driver's license or passport)",
    "Proof of income (last 2 pay stubs OR last 2 years W-2/1099)",
    "Beneficiary information (full legal name, DOB, SSN, relationship)",
)

FINANCIAL_UNDERWRITING_THRESHOLD = 1_000_000

FINANCIAL_UNDERWRITING_PACKAGE = (
    "Financial underwriting package (tax returns, bank statements, net worth statement)"
)
MEDICATION_LIST = "Complete medication list with dosages and prescribing physicians"
PHYSICIAN_CONTACT = "Physician contact information (name, address, phone, dates of visits)"
IUL_ILLUSTRATION = "Signed IUL illustration acknowledgment"
TRAVEL_QUESTIONNAIRE = "Foreign travel questionnaire"
AVOCATION_QUESTIONNAIRE = "Avocation questionnaire (frequency, training, safety measures)"
OCCUPATION_QUESTIONNAIRE = "Occupational duties questionnaire"


class DocumentChecklistBuilder:
    """
    Build the ordered, de-duplicated document checklist for one carrier.

    Order: baseline documents, applicant-driven documents, then documents
    required by the carrier's findings in emission order.
    """

    def build(self, applicant: ApplicantRecord, findings: Iterable[Finding]) -> List[str]:
        """
        Args:
            applicant: Normalized applicant
            findings: Findings emitted for the carrier

        Returns:
            Checklist with duplicates removed, first occurrence kept
        """
        documents: List[str] = list(BASELINE_DOCUMENTS)

        if at_least(applicant.coverage, FINANCIAL_UNDERWRITING_THRESHOLD):
            documents.append(FINANCIAL_UNDERWRITING_PACKAGE)
        if applicant.medications:
            documents.append(MEDICATION_LIST)
        if applicant.doctor_names:
            documents.append(PHYSICIAN_CONTACT)
        if applicant.product_type == ProductType.IUL:
            documents.append(IUL_ILLUSTRATION)
        if applicant.travel_high_risk:
            documents.append(TRAVEL_QUESTIONNAIRE)
        if applicant.avocation_risk:
            documents.append(AVOCATION_QUESTIONNAIRE)
        if applicant.hazardous_occupation:
            documents.append(OCCUPATION_QUESTIONNAIRE)

        for finding in findings:
            documents.extend(finding.documents)

        return list(dict.fromkeys(documents))
