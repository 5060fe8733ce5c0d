"""Plain-text carrier eligibility report for agent review."""

from typing import List, Sequence

from carrier_intake.services.rule_engine.engine import CarrierEvaluation

BANNER = "═" * 63
SECTION_RULE = "━" * 59

REPORT_TITLE = "  CARRIER ELIGIBILITY ANALYSIS — LICENSED AGENT REVIEW"
REPORT_END = "  END OF ANALYSIS"


class ReportRenderer:
    """
    Render carrier evaluations into the text report emailed to agents.

    Output is byte-stable for equal input. Sections appear in evaluation
    order; empty citation, flag and note blocks are omitted, the
    documentation block is always present.
    """

    def render(self, evaluations: Sequence[CarrierEvaluation]) -> str:
        lines: List[str] = [BANNER, REPORT_TITLE, BANNER, ""]

        for evaluation in evaluations:
            lines.extend(self._render_section(evaluation))

        lines.extend([BANNER, REPORT_END, BANNER])
        return "\n".join(lines) + "\n"

    def _render_section(self, evaluation: CarrierEvaluation) -> List[str]:
        lines = [
            SECTION_RULE,
            f"  {evaluation.carrier_name.upper()}",
            SECTION_RULE,
            "",
            f"STATUS: {evaluation.status.label}",
            "",
        ]

        lines.extend(_block("GUIDELINE CITATIONS:", "•", evaluation.citations))
        lines.extend(_block("FLAGS / REVIEW REQUIRED:", "⚠", evaluation.flags))
        lines.extend(_block("UNDERWRITING NOTES:", "→", evaluation.underwriting_notes))
        lines.extend(
            _block("REQUIRED DOCUMENTATION:", "☐", evaluation.document_checklist, always=True)
        )
        return lines


def _block(heading: str, bullet: str, items: Sequence[str], always: bool = False) -> List[str]:
    if not items and not always:
        return []
    return [heading, *(f"  {bullet} {item}" for item in items), ""]
