"""Unit tests for the carrier rule engine"""

from typing import List

import pytest

from carrier_intake.core.enums import (
    CarrierCode,
    EligibilityStatus,
    ProductType,
    RuleType,
    StatusModel,
)
from carrier_intake.core.formatting import format_usd
from carrier_intake.services.rule_engine import (
    DEFAULT_CARRIER_TABLE,
    EvaluationContext,
    Finding,
    RuleEngine,
    RuleEvaluator,
    load_carrier_table,
)
from carrier_intake.services.rule_engine.checklist import (
    BASELINE_DOCUMENTS,
    FINANCIAL_UNDERWRITING_PACKAGE,
    IUL_ILLUSTRATION,
    MEDICATION_LIST,
    TRAVEL_QUESTIONNAIRE,
)
from carrier_intake.services.rule_engine.evaluators.tobacco_evaluator import (
    TOBACCO_QUESTIONNAIRE,
)

CARRIER_IDS = [carrier.code.value for carrier in DEFAULT_CARRIER_TABLE]


def test_healthy_applicant_is_eligible_with_baseline_documents(engine, carriers, applicant):
    """No triggers: eligible and exactly the three baseline documents"""
    result = engine.evaluate(carriers[CarrierCode.NATIONAL_LIFE_GROUP], applicant)

    assert result.status == EligibilityStatus.ELIGIBLE
    assert result.is_eligible
    assert result.citations == ()
    assert result.flags == ()
    assert result.underwriting_notes == ()
    assert result.document_checklist == BASELINE_DOCUMENTS


@pytest.mark.parametrize("carrier", DEFAULT_CARRIER_TABLE, ids=CARRIER_IDS)
def test_age_above_max_issue_age_is_ineligible(engine, make_applicant, carrier):
    applicant = make_applicant(
        age=carrier.max_issue_age + 1,
        product_type=carrier.products[0],
    )

    result = engine.evaluate(carrier, applicant)

    assert result.status == EligibilityStatus.INELIGIBLE
    assert any(
        f"Maximum issue age {carrier.max_issue_age}." in citation for citation in result.citations
    )


@pytest.mark.parametrize("carrier", DEFAULT_CARRIER_TABLE, ids=CARRIER_IDS)
def test_age_at_max_issue_age_has_no_age_citation(engine, make_applicant, carrier):
    applicant = make_applicant(age=carrier.max_issue_age, product_type=carrier.products[0])

    result = engine.evaluate(carrier, applicant)

    assert not any("Maximum issue age" in citation for citation in result.citations)


@pytest.mark.parametrize("carrier", DEFAULT_CARRIER_TABLE, ids=CARRIER_IDS)
def test_coverage_below_minimum_is_ineligible(engine, make_applicant, carrier):
    applicant = make_applicant(
        coverage=carrier.min_coverage - 1,
        product_type=carrier.products[0],
    )

    result = engine.evaluate(carrier, applicant)

    assert result.status == EligibilityStatus.INELIGIBLE
    assert any(
        f"Minimum face amount {format_usd(carrier.min_coverage)}" in citation
        for citation in result.citations
    )


@pytest.mark.parametrize("carrier", DEFAULT_CARRIER_TABLE, ids=CARRIER_IDS)
def test_coverage_above_income_multiple_needs_review(engine, make_applicant, carrier):
    income = 10_000
    cap = income * carrier.income_multiple
    applicant = make_applicant(
        annual_income=income,
        coverage=cap + 1_000,
        product_type=carrier.products[0],
    )

    result = engine.evaluate(carrier, applicant)

    assert result.status == EligibilityStatus.NEEDS_REVIEW
    assert len(result.flags) == 1
    assert f"{carrier.income_multiple}×" in result.flags[0]
    assert format_usd(cap) in result.flags[0]
    assert (
        "Financial justification statement (assets, liabilities, estate planning needs)"
        in result.document_checklist
    )


def test_income_multiple_ignores_unknown_income(engine, carriers, make_applicant):
    applicant = make_applicant(annual_income=None, coverage=5_000_000)

    result = engine.evaluate(carriers[CarrierCode.NATIONAL_LIFE_GROUP], applicant)

    assert not any("income cap" in flag for flag in result.flags)


def test_unknown_product_is_ineligible_everywhere(engine, make_applicant):
    applicant = make_applicant(product_type="Final Expense")

    results = engine.evaluate_all(applicant)

    for result in results:
        assert result.status == EligibilityStatus.INELIGIBLE
        assert any("Final Expense not offered" in c for c in result.citations)


def test_product_citation_lists_offered_products(engine, carriers, applicant):
    result = engine.evaluate(carriers[CarrierCode.LAFAYETTE_LIFE], applicant)

    assert result.citations == (
        "Lafayette Product Guide: Term not offered by Lafayette Life. "
        "Lafayette Life offers Whole Life and IUL only.",
    )


def test_tobacco_within_lookback_is_tobacco_class(engine, carriers, make_applicant):
    applicant = make_applicant(tobacco_use=True, tobacco_years=1)

    result = engine.evaluate(carriers[CarrierCode.NATIONAL_LIFE_GROUP], applicant)

    assert result.status == EligibilityStatus.ELIGIBLE
    assert result.underwriting_notes == (
        "NLG Underwriting Guide §6.1: Tobacco use within 24 months → Tobacco rate class.",
    )
    assert TOBACCO_QUESTIONNAIRE in result.document_checklist


def test_tobacco_past_lookback_is_non_tobacco_class(engine, carriers, make_applicant):
    applicant = make_applicant(tobacco_use=True, tobacco_years=1)

    result = engine.evaluate(carriers[CarrierCode.TRANSAMERICA], applicant)

    assert result.underwriting_notes == (
        "Transamerica UW Guide §5.1: Tobacco-free 12+ months → Non-Tobacco rate class eligible.",
    )
    assert TOBACCO_QUESTIONNAIRE not in result.document_checklist


@pytest.mark.parametrize("tobacco_years", [None, float("nan")])
def test_tobacco_without_years_needs_clarification(engine, carriers, make_applicant, tobacco_years):
    applicant = make_applicant(tobacco_use=True, tobacco_years=tobacco_years)

    result = engine.evaluate(carriers[CarrierCode.MUTUAL_OF_OMAHA], applicant)

    assert result.status == EligibilityStatus.NEEDS_REVIEW
    assert result.flags == (
        "MOO Underwriting Manual §4.1: Further clarification required - years since "
        "last tobacco use not specified.",
    )
    assert result.underwriting_notes == ()


def test_non_smoker_gets_no_tobacco_output(engine, carriers, make_applicant):
    applicant = make_applicant(tobacco_use=False, tobacco_years=0)

    result = engine.evaluate(carriers[CarrierCode.AMERITAS], applicant)

    assert result.underwriting_notes == ()
    assert result.flags == ()


def test_coverage_of_exactly_one_million_requires_financial_package(engine, carriers, make_applicant):
    applicant = make_applicant(coverage=1_000_000)

    result = engine.evaluate(carriers[CarrierCode.AMERICAN_AMICABLE], applicant)

    assert FINANCIAL_UNDERWRITING_PACKAGE in result.document_checklist


def test_coverage_below_one_million_has_no_financial_package(engine, carriers, make_applicant):
    applicant = make_applicant(coverage=999_999)

    result = engine.evaluate(carriers[CarrierCode.AMERICAN_AMICABLE], applicant)

    assert FINANCIAL_UNDERWRITING_PACKAGE not in result.document_checklist


def test_checklist_adds_applicant_documents_in_order(engine, carriers, make_applicant):
    applicant = make_applicant(
        product_type=ProductType.IUL,
        medications="Metformin",
        travel_high_risk=True,
    )

    result = engine.evaluate(carriers[CarrierCode.AMERITAS], applicant)
    checklist = list(result.document_checklist)

    assert checklist[:3] == list(BASELINE_DOCUMENTS)
    assert checklist.index(MEDICATION_LIST) < checklist.index(IUL_ILLUSTRATION)
    assert checklist.index(IUL_ILLUSTRATION) < checklist.index(TRAVEL_QUESTIONNAIRE)
    assert len(checklist) == len(set(checklist))


def test_scenario_age_82_against_national_life_group(engine, carriers, make_applicant):
    applicant = make_applicant(age=82, annual_income=80_000, coverage=500_000)

    result = engine.evaluate(carriers[CarrierCode.NATIONAL_LIFE_GROUP], applicant)

    assert result.status == EligibilityStatus.INELIGIBLE
    assert result.citations == (
        "NLG Underwriting Guide §2.1: Maximum issue age 80. Applicant age 82 exceeds limit.",
    )


def test_scenario_two_million_within_income_cap(engine, carriers, make_applicant):
    """30 × 80,000 = 2,400,000 cap; coverage is within it but over $1M"""
    applicant = make_applicant(age=60, annual_income=80_000, coverage=2_000_000)

    result = engine.evaluate(carriers[CarrierCode.NATIONAL_LIFE_GROUP], applicant)

    assert result.flags == ()
    assert result.status == EligibilityStatus.ELIGIBLE
    assert FINANCIAL_UNDERWRITING_PACKAGE in result.document_checklist


def test_malformed_age_never_triggers_age_citation(engine, carriers, make_applicant):
    applicant = make_applicant(age=float("nan"))

    result = engine.evaluate(carriers[CarrierCode.MUTUAL_OF_OMAHA], applicant)

    assert result.citations == ()


def test_evaluation_is_idempotent(engine, carriers, make_applicant):
    applicant = make_applicant(tobacco_use=True, tobacco_years=None, coverage=2_000_000)
    carrier = carriers[CarrierCode.NATIONAL_LIFE_GROUP]

    assert engine.evaluate(carrier, applicant) == engine.evaluate(carrier, applicant)


def test_evaluate_all_follows_table_order(engine, applicant):
    results = engine.evaluate_all(applicant)

    assert [r.carrier_code for r in results] == [c.code for c in DEFAULT_CARRIER_TABLE]


def test_binary_status_model_collapses_flags_to_ineligible(carriers, make_applicant):
    engine = RuleEngine(status_model=StatusModel.BINARY)
    applicant = make_applicant(annual_income=10_000, coverage=500_000)

    result = engine.evaluate(carriers[CarrierCode.NATIONAL_LIFE_GROUP], applicant)

    assert result.status == EligibilityStatus.INELIGIBLE
    assert result.citations == ()
    assert len(result.flags) == 1


def test_get_carrier(engine):
    assert engine.get_carrier("ameritas").name == "Ameritas"

    with pytest.raises(ValueError, match="Unknown carrier code"):
        engine.get_carrier("acme_life")


def test_restricted_carrier_table_keeps_table_order():
    carriers = load_carrier_table(["transamerica", "mutual_of_omaha"])

    assert [c.code for c in carriers] == [CarrierCode.MUTUAL_OF_OMAHA, CarrierCode.TRANSAMERICA]
    assert load_carrier_table([]) == DEFAULT_CARRIER_TABLE

    with pytest.raises(ValueError):
        load_carrier_table(["acme_life"])


class AlwaysReviewEvaluator(RuleEvaluator):
    def evaluate(self, context: EvaluationContext) -> List[Finding]:
        return [self._flag(f"{context.carrier.name}: manual review")]


def test_register_evaluator_replaces_default(carriers, applicant):
    engine = RuleEngine()
    engine.register_evaluator(RuleType.CARRIER_GUIDELINES, AlwaysReviewEvaluator())

    result = engine.evaluate(carriers[CarrierCode.TRANSAMERICA], applicant)

    assert result.status == EligibilityStatus.NEEDS_REVIEW
    assert result.flags == ("Transamerica: manual review",)
