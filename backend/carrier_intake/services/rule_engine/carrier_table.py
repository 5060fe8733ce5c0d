"""Static carrier rule table."""

import logging
from typing import Iterable, Optional, Tuple

from carrier_intake.core.enums import CarrierCode, ProductType
from carrier_intake.models.domain.carrier import CarrierRule, GuidelineSections

logger = logging.getLogger(__name__)


DEFAULT_CARRIER_TABLE: Tuple[CarrierRule, ...] = (
    CarrierRule(
        code=CarrierCode.NATIONAL_LIFE_GROUP,
        name="National Life Group",
        products=(ProductType.TERM, ProductType.IUL, ProductType.WHOLE_LIFE),
        max_issue_age=80,
        min_coverage=25_000,
        income_multiple=30,
        tobacco_lookback_years=2,
        guide="NLG Underwriting Guide",
        product_guide="NLG Product Matrix 2025",
        sections=GuidelineSections(
            max_issue_age="§2.1",
            min_coverage="§4.1",
            income_multiple="§4.2",
            tobacco="§6.1",
        ),
    ),
    CarrierRule(
        code=CarrierCode.MUTUAL_OF_OMAHA,
        name="Mutual of Omaha",
        products=(ProductType.TERM, ProductType.WHOLE_LIFE),
        max_issue_age=75,
        min_coverage=50_000,
        income_multiple=25,
        tobacco_lookback_years=2,
        guide="MOO Underwriting Manual",
        product_guide="MOO Product Guide 2025",
        sections=GuidelineSections(
            max_issue_age="§1.2",
            min_coverage="§3.1",
            income_multiple="§3.2",
            tobacco="§4.1",
        ),
    ),
    CarrierRule(
        code=CarrierCode.AMERITAS,
        name="Ameritas",
        products=(ProductType.TERM, ProductType.IUL),
        max_issue_age=80,
        min_coverage=100_000,
        income_multiple=30,
        tobacco_lookback_years=2,
        guide="Ameritas UW Guide",
        product_guide="Ameritas Product Matrix",
        sections=GuidelineSections(
            max_issue_age="§2.1",
            min_coverage="§4.1",
            income_multiple="§4.2",
            tobacco="§5.1",
        ),
    ),
    CarrierRule(
        code=CarrierCode.LAFAYETTE_LIFE,
        name="Lafayette Life",
        products=(ProductType.WHOLE_LIFE, ProductType.IUL),
        max_issue_age=85,
        min_coverage=25_000,
        income_multiple=35,
        tobacco_lookback_years=2,
        guide="Lafayette UW Manual",
        product_guide="Lafayette Product Guide",
        sections=GuidelineSections(
            max_issue_age="§1.3",
            min_coverage="§3.1",
            income_multiple="§3.2",
            tobacco="§6.1",
        ),
    ),
    CarrierRule(
        code=CarrierCode.TRANSAMERICA,
        name="Transamerica",
        products=(ProductType.TERM,),
        max_issue_age=79,
        min_coverage=25_000,
        income_multiple=25,
        tobacco_lookback_years=1,
        guide="Transamerica UW Guide",
        product_guide="Transamerica Product Portfolio",
        sections=GuidelineSections(
            max_issue_age="§1.1",
            min_coverage="§4.1",
            income_multiple="§4.2",
            tobacco="§5.1",
        ),
    ),
    CarrierRule(
        code=CarrierCode.AMERICAN_AMICABLE,
        name="American Amicable",
        products=(ProductType.TERM, ProductType.WHOLE_LIFE),
        max_issue_age=85,
        min_coverage=25_000,
        income_multiple=20,
        tobacco_lookback_years=2,
        guide="AA UW Manual",
        product_guide="AA Product Guide",
        sections=GuidelineSections(
            max_issue_age="§2.1",
            min_coverage="§3.1",
            income_multiple="§3.2",
            tobacco="§5.1",
        ),
    ),
)


def load_carrier_table(codes: Optional[Iterable[str]] = None) -> Tuple[CarrierRule, ...]:
    """
    Return the carrier table, optionally restricted to a subset of carriers.

    Table order is preserved regardless of the order of ``codes``.

    Args:
        codes: Carrier codes to keep; None or empty keeps every carrier

    Returns:
        Tuple of CarrierRule in table order

    Raises:
        ValueError: If a code does not name a known carrier
    """
    wanted = [code.strip() for code in codes or [] if code and code.strip()]
    if not wanted:
        return DEFAULT_CARRIER_TABLE

    known = {carrier.code.value for carrier in DEFAULT_CARRIER_TABLE}
    unknown = [code for code in wanted if code not in known]
    if unknown:
        raise ValueError(f"Unknown carrier code(s): {', '.join(unknown)}")

    carriers = tuple(c for c in DEFAULT_CARRIER_TABLE if c.code.value in wanted)
    logger.debug(f"Carrier table restricted to {len(carriers)} carrier(s): {', '.join(wanted)}")
    return carriers
