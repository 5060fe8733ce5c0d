"""Unit tests for the agent report renderer"""

from carrier_intake.core.enums import CarrierCode, EligibilityStatus
from carrier_intake.services.report_renderer import BANNER, SECTION_RULE, ReportRenderer
from carrier_intake.services.rule_engine import CarrierEvaluation


def test_empty_report_has_header_and_footer_only():
    report = ReportRenderer().render([])

    assert report == (
        f"{BANNER}\n"
        "  CARRIER ELIGIBILITY ANALYSIS — LICENSED AGENT REVIEW\n"
        f"{BANNER}\n"
        "\n"
        f"{BANNER}\n"
        "  END OF ANALYSIS\n"
        f"{BANNER}\n"
    )


def test_section_layout():
    evaluation = CarrierEvaluation(
        carrier_code=CarrierCode.TRANSAMERICA,
        carrier_name="Transamerica",
        status=EligibilityStatus.NEEDS_REVIEW,
        citations=(),
        flags=("Coverage needs review.",),
        underwriting_notes=("Tobacco rate class.",),
        document_checklist=("Photo ID", "Proof of income"),
    )

    report = ReportRenderer().render([evaluation])

    expected_section = (
        f"{SECTION_RULE}\n"
        "  TRANSAMERICA\n"
        f"{SECTION_RULE}\n"
        "\n"
        "STATUS: ⚠️ Needs Review\n"
        "\n"
        "FLAGS / REVIEW REQUIRED:\n"
        "  ⚠ Coverage needs review.\n"
        "\n"
        "UNDERWRITING NOTES:\n"
        "  → Tobacco rate class.\n"
        "\n"
        "REQUIRED DOCUMENTATION:\n"
        "  ☐ Photo ID\n"
        "  ☐ Proof of income\n"
        "\n"
    )
    assert expected_section in report
    assert "GUIDELINE CITATIONS:" not in report
    assert report.endswith(f"{BANNER}\n  END OF ANALYSIS\n{BANNER}\n")


def test_full_report_is_stable_and_ordered(engine, make_applicant):
    applicant = make_applicant(age=82)
    renderer = ReportRenderer()

    first = renderer.render(engine.evaluate_all(applicant))
    second = renderer.render(engine.evaluate_all(applicant))

    assert first == second
    headings = [line.strip() for line in first.splitlines() if line.isupper() and line.startswith("  ")]
    assert headings == [
        "CARRIER ELIGIBILITY ANALYSIS — LICENSED AGENT REVIEW",
        "NATIONAL LIFE GROUP",
        "MUTUAL OF OMAHA",
        "AMERITAS",
        "LAFAYETTE LIFE",
        "TRANSAMERICA",
        "AMERICAN AMICABLE",
        "END OF ANALYSIS",
    ]
    assert "STATUS: ❌ Not Eligible" in first
    assert "  • NLG Underwriting Guide §2.1: Maximum issue age 80. Applicant age 82 exceeds limit." in first
