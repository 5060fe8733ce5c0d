"""Normalized applicant record consumed by the carrier rule engine."""

from dataclasses import dataclass
from typing import Optional, Union

from carrier_intake.core.enums import ProductType


@dataclass(frozen=True)
class ApplicantRecord:
    """
    Typed, immutable view of one intake submission.

    Numeric fields are ``None`` when the value was not provided and ``NaN``
    when it was provided but could not be parsed. Years-since fields keep
    ``None`` (event never happened) distinct from ``0`` (event this year).

    Attributes:
        age: Applicant age in years
        sex: Sex as entered on the form
        height_in: Height in inches
        weight_lb: Weight in pounds
        bmi: Body mass index rounded to one decimal, None if not computable
        annual_income: Annual income in whole dollars
        coverage: Requested face amount in whole dollars
        product_type: Requested product, raw label if not a known product
        term_years: Term length for Term products
        tobacco_use: Whether the applicant disclosed tobacco use
        tobacco_years: Years since last tobacco use
        cancer_history_years: Years since cancer treatment
        heart_event_years: Years since heart attack / stent
        dui_years: Years since DUI
        felony_years: Years since felony conviction
        bankruptcy_years: Years since bankruptcy
        medications: Free-text medication list
        doctor_names: Free-text physician list
        state: State of residence
    """

    age: Optional[float] = None
    sex: Optional[str] = None
    height_in: Optional[float] = None
    weight_lb: Optional[float] = None
    bmi: Optional[float] = None
    annual_income: Optional[float] = None
    coverage: Optional[float] = None
    product_type: Optional[Union[ProductType, str]] = None
    term_years: Optional[float] = None

    # Tobacco
    tobacco_use: bool = False
    tobacco_years: Optional[float] = None

    # Disclosed history, years since event
    cancer_history_years: Optional[float] = None
    heart_event_years: Optional[float] = None
    dui_years: Optional[float] = None
    felony_years: Optional[float] = None
    bankruptcy_years: Optional[float] = None

    # Medical risk flags
    uncontrolled_diabetes: bool = False
    uncontrolled_hypertension: bool = False
    insulin_dependent: bool = False
    copd: bool = False

    # Lifestyle risk flags
    hazardous_occupation: bool = False
    avocation_risk: bool = False
    travel_high_risk: bool = False

    # Disclosures
    medications: Optional[str] = None
    doctor_names: Optional[str] = None
    state: Optional[str] = None

    @property
    def product_label(self) -> str:
        """Product as displayed in citations."""
        if self.product_type is None:
            return "Unspecified product"
        if isinstance(self.product_type, ProductType):
            return self.product_type.value
        return self.product_type
