"""Applicant record normalizer for raw intake form values."""

import logging
import math
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Mapping, Optional, Union

from pydantic.alias_generators import to_camel

from carrier_intake.core.enums import ProductType
from carrier_intake.models.domain.applicant import ApplicantRecord

logger = logging.getLogger(__name__)

NAN = float("nan")

# Plain decimals, optionally with thousands separators in groups of three
NUMBER_PATTERN = re.compile(r"[+-]?(?:(?:\d{1,3}(?:,\d{3})+|\d+)(?:\.\d+)?|\.\d+)")

# Form labels that differ from the product type values
PRODUCT_ALIASES = {
    "indexed universal life (iul)": ProductType.IUL,
    "indexed universal life": ProductType.IUL,
    "term life": ProductType.TERM,
}

YEARS_SINCE_FIELDS = (
    "tobacco_years",
    "cancer_history_years",
    "heart_event_years",
    "dui_years",
    "felony_years",
    "bankruptcy_years",
)

FLAG_FIELDS = (
    "tobacco_use",
    "uncontrolled_diabetes",
    "uncontrolled_hypertension",
    "insulin_dependent",
    "copd",
    "hazardous_occupation",
    "avocation_risk",
    "travel_high_risk",
)


def coerce_number(raw: Any) -> Optional[float]:
    """
    Coerce a raw form value to a number.

    Returns None for missing or blank values and NaN for values that cannot
    be parsed. Integral values are returned as int.
    """
    if raw is None or isinstance(raw, bool):
        return None if raw is None else NAN

    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = str(raw).strip()
        if not text:
            return None
        if not NUMBER_PATTERN.fullmatch(text):
            return NAN
        value = float(text.replace(",", ""))

    if math.isnan(value) or math.isinf(value):
        return NAN
    if value.is_integer():
        return int(value)
    return value


def coerce_years_since(raw: Any) -> Optional[float]:
    """Coerce a years-since-event value; negative years are malformed."""
    value = coerce_number(raw)
    if value is not None and not math.isnan(value) and value < 0:
        return NAN
    return value


def coerce_flag(raw: Any) -> bool:
    """Only the literal ``"Yes"`` (or JSON true) counts as an affirmative answer."""
    return raw is True or raw == "Yes"


def coerce_text(raw: Any) -> Optional[str]:
    """Strip free text; blank becomes None."""
    if raw is None:
        return None
    text = str(raw).strip()
    return text or None


def normalize_product_type(raw: Any) -> Optional[Union[ProductType, str]]:
    """Map a product label to a ProductType, keeping unknown labels verbatim."""
    text = coerce_text(raw)
    if text is None:
        return None

    lowered = text.lower()
    for product in ProductType:
        if product.value.lower() == lowered:
            return product
    return PRODUCT_ALIASES.get(lowered, text)


def calculate_bmi(height_in: Optional[float], weight_lb: Optional[float]) -> Optional[float]:
    """
    Calculate BMI from imperial units, rounded half-up to one decimal.

    BMI = weight_lb / height_in^2 * 703. Returns None if either input is
    missing, malformed, zero or negative.
    """
    for value in (height_in, weight_lb):
        if value is None or math.isnan(value) or value <= 0:
            return None

    bmi = (weight_lb / (height_in * height_in)) * 703
    return float(Decimal(str(bmi)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _lookup(raw: Mapping[str, Any], field: str) -> Any:
    """Read a field by snake_case name, falling back to the form's camelCase key."""
    if field in raw:
        return raw[field]
    return raw.get(to_camel(field))


def normalize_applicant(raw: Mapping[str, Any]) -> ApplicantRecord:
    """
    Convert raw intake values into an ApplicantRecord.

    Never raises: missing values become None, malformed numbers become NaN
    and fail every threshold comparison downstream.

    Args:
        raw: Form values keyed by snake_case or camelCase field names

    Returns:
        Normalized ApplicantRecord
    """
    height_in = coerce_number(_lookup(raw, "height_in"))
    weight_lb = coerce_number(_lookup(raw, "weight_lb"))

    values: dict[str, Any] = {
        "age": coerce_number(_lookup(raw, "age")),
        "sex": coerce_text(_lookup(raw, "sex")),
        "height_in": height_in,
        "weight_lb": weight_lb,
        "bmi": calculate_bmi(height_in, weight_lb),
        "annual_income": coerce_number(_lookup(raw, "annual_income")),
        "coverage": coerce_number(_lookup(raw, "coverage")),
        "product_type": normalize_product_type(_lookup(raw, "product_type")),
        "term_years": coerce_number(_lookup(raw, "term_years")),
        "medications": coerce_text(_lookup(raw, "medications")),
        "doctor_names": coerce_text(_lookup(raw, "doctor_names")),
        "state": coerce_text(_lookup(raw, "state")),
    }
    for field in YEARS_SINCE_FIELDS:
        values[field] = coerce_years_since(_lookup(raw, field))
    for field in FLAG_FIELDS:
        values[field] = coerce_flag(_lookup(raw, field))

    record = ApplicantRecord(**values)
    logger.debug(
        f"Normalized applicant: age={record.age}, product={record.product_label}, "
        f"coverage={record.coverage}, bmi={record.bmi}"
    )
    return record
