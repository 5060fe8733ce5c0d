"""Core enums for type safety across the application."""

from enum import Enum


class ProductType(str, Enum):
    """Life insurance product types offered on the intake form."""

    TERM = "Term"
    WHOLE_LIFE = "Whole Life"
    IUL = "IUL"
    UNIVERSAL_LIFE = "Universal Life"
    VARIABLE_UNIVERSAL_LIFE = "Variable Universal Life"


class CarrierCode(str, Enum):
    """Carriers with guideline evaluators."""

    NATIONAL_LIFE_GROUP = "national_life_group"
    MUTUAL_OF_OMAHA = "mutual_of_omaha"
    AMERITAS = "ameritas"
    LAFAYETTE_LIFE = "lafayette_life"
    TRANSAMERICA = "transamerica"
    AMERICAN_AMICABLE = "american_amicable"


class EligibilityStatus(str, Enum):
    """Per-carrier eligibility outcome."""

    ELIGIBLE = "eligible"
    NEEDS_REVIEW = "needs_review"
    INELIGIBLE = "ineligible"

    @property
    def label(self) -> str:
        """Display label used in the agent report."""
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    EligibilityStatus.ELIGIBLE: "✅ Potentially Eligible",
    EligibilityStatus.NEEDS_REVIEW: "⚠️ Needs Review",
    EligibilityStatus.INELIGIBLE: "❌ Not Eligible",
}


class StatusModel(str, Enum):
    """How findings collapse into an eligibility status."""

    # citation -> ineligible, flag -> needs review
    TIERED = "tiered"
    # eligible only with no citations and no flags
    BINARY = "binary"


class FindingKind(str, Enum):
    """Kinds of output an evaluator can emit."""

    CITATION = "citation"
    FLAG = "flag"
    NOTE = "note"


class RuleType(str, Enum):
    """Checks run by the rule engine for every carrier."""

    # Generic cross-carrier checks
    PRODUCT_AVAILABILITY = "product_availability"
    INCOME_MULTIPLE = "income_multiple"
    MIN_COVERAGE = "min_coverage"
    MAX_ISSUE_AGE = "max_issue_age"
    TOBACCO_CLASS = "tobacco_class"

    # Carrier-specific guidelines
    CARRIER_GUIDELINES = "carrier_guidelines"
