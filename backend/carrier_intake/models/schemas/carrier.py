"""Pydantic schemas for the configured carrier table."""

from pydantic import BaseModel

from carrier_intake.models.domain.carrier import CarrierRule


class CarrierResponse(BaseModel):
    """Schema for a carrier's underwriting thresholds."""

    code: str
    name: str
    products: list[str]
    max_issue_age: int
    min_coverage: int
    income_multiple: int
    tobacco_lookback_years: int
    guide: str
    product_guide: str

    @classmethod
    def from_rule(cls, carrier: CarrierRule) -> "CarrierResponse":
        return cls(
            code=carrier.code.value,
            name=carrier.name,
            products=[product.value for product in carrier.products],
            max_issue_age=carrier.max_issue_age,
            min_coverage=carrier.min_coverage,
            income_multiple=carrier.income_multiple,
            tobacco_lookback_years=carrier.tobacco_lookback_years,
            guide=carrier.guide,
            product_guide=carrier.product_guide,
        )
