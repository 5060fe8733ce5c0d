"""Unit tests for applicant record normalization"""

import math

import pytest

from carrier_intake.core.enums import ProductType
from carrier_intake.services.normalizer import (
    calculate_bmi,
    coerce_flag,
    coerce_number,
    coerce_years_since,
    normalize_applicant,
    normalize_product_type,
)


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_coerce_number_missing_values_are_none(raw):
    assert coerce_number(raw) is None


def test_coerce_number_parses_numeric_strings():
    assert coerce_number("42") == 42
    assert isinstance(coerce_number("42"), int)
    assert coerce_number(" 1,000,000 ") == 1_000_000
    assert coerce_number("2.5") == 2.5
    assert coerce_number(75) == 75


@pytest.mark.parametrize(
    "raw", ["abc", "12abc", True, "nan", "inf", "2_5", "1,5", "1,00", "+", "1e5"]
)
def test_coerce_number_malformed_values_are_nan(raw):
    assert math.isnan(coerce_number(raw))


def test_coerce_years_since_keeps_zero_distinct_from_missing():
    assert coerce_years_since("0") == 0
    assert coerce_years_since("") is None
    assert coerce_years_since(None) is None


def test_coerce_years_since_negative_is_malformed():
    assert math.isnan(coerce_years_since("-1"))


def test_coerce_flag_only_yes_is_true():
    assert coerce_flag("Yes") is True
    assert coerce_flag(True) is True
    assert coerce_flag("No") is False
    assert coerce_flag("") is False
    assert coerce_flag(None) is False
    assert coerce_flag("yes please") is False


def test_calculate_bmi_rounds_half_up():
    """(190 / 4900) × 703 = 27.259... rounds to 27.3"""
    assert calculate_bmi(70, 190) == 27.3


@pytest.mark.parametrize(
    "height_in,weight_lb",
    [(None, 190), (70, None), (0, 190), (70, -5), (float("nan"), 190)],
)
def test_calculate_bmi_requires_positive_inputs(height_in, weight_lb):
    assert calculate_bmi(height_in, weight_lb) is None


def test_normalize_product_type():
    assert normalize_product_type("Term") == ProductType.TERM
    assert normalize_product_type("whole life") == ProductType.WHOLE_LIFE
    assert normalize_product_type("Indexed Universal Life (IUL)") == ProductType.IUL
    assert normalize_product_type("Final Expense") == "Final Expense"
    assert normalize_product_type("  ") is None


def test_normalize_applicant_from_form_values(intake_form):
    record = normalize_applicant(intake_form)

    assert record.age == 45
    assert record.annual_income == 120_000
    assert record.coverage == 750_000
    assert record.product_type == ProductType.TERM
    assert record.bmi == 25.0
    assert record.tobacco_use is False
    assert record.tobacco_years is None
    assert record.medications is None
    assert record.state == "TX"


def test_normalize_applicant_accepts_snake_case_keys():
    record = normalize_applicant(
        {
            "height_in": 70,
            "weight_lb": 190,
            "dui_years": 0,
            "travel_high_risk": "Yes",
            "medications": "  Lisinopril 10mg  ",
        }
    )

    assert record.bmi == 27.3
    assert record.dui_years == 0
    assert record.felony_years is None
    assert record.travel_high_risk is True
    assert record.medications == "Lisinopril 10mg"


def test_normalize_applicant_never_raises_on_garbage():
    record = normalize_applicant(
        {"age": "old", "coverage": "lots", "heightIn": "tall", "tobaccoYears": "-3"}
    )

    assert math.isnan(record.age)
    assert math.isnan(record.coverage)
    assert record.bmi is None
    assert math.isnan(record.tobacco_years)
    assert record.product_type is None
