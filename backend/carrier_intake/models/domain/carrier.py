"""Carrier guideline configuration used by the rule engine."""

from dataclasses import dataclass

from carrier_intake.core.enums import CarrierCode, ProductType


@dataclass(frozen=True)
class GuidelineSections:
    """Guideline section numbers cited by the generic checks."""

    max_issue_age: str
    min_coverage: str
    income_multiple: str
    tobacco: str


@dataclass(frozen=True)
class CarrierRule:
    """
    Static underwriting configuration for one carrier.

    The carrier-specific decline predicate is selected by ``code``; see
    CarrierGuidelineEvaluator.

    Attributes:
        code: Carrier tag
        name: Display name
        products: Offered product types, in display order
        max_issue_age: Oldest age at which a policy is issued
        min_coverage: Minimum face amount in dollars
        income_multiple: Maximum coverage as a multiple of annual income
        tobacco_lookback_years: Tobacco-free years required for non-tobacco rates
        guide: Underwriting guide title cited by the carrier's rules
        product_guide: Product matrix title cited for availability
        sections: Section numbers for the generic checks
    """

    code: CarrierCode
    name: str
    products: tuple[ProductType, ...]
    max_issue_age: int
    min_coverage: int
    income_multiple: int
    tobacco_lookback_years: int
    guide: str
    product_guide: str
    sections: GuidelineSections

    def cite(self, section: str) -> str:
        """Return a citation prefix such as ``NLG Underwriting Guide §2.1``."""
        return f"{self.guide} {section}"

    def offers(self, product: object) -> bool:
        """Check whether the carrier offers a product type."""
        return product in self.products

    @property
    def products_label(self) -> str:
        """Human-readable product list, e.g. ``Term and Whole Life``."""
        names = [product.value for product in self.products]
        if len(names) == 1:
            return names[0]
        return ", ".join(names[:-1]) + " and " + names[-1]

    def __repr__(self) -> str:
        return f"<CarrierRule(code={self.code.value}, name={self.name!r})>"
