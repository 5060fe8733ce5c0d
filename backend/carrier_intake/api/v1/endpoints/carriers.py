"""Carrier table endpoints."""

from typing import Annotated, List

from fastapi import APIRouter, Depends, HTTPException, status

from carrier_intake.deps import get_rule_engine
from carrier_intake.models.schemas.carrier import CarrierResponse
from carrier_intake.services.rule_engine import RuleEngine

router = APIRouter()


@router.get(
    "/",
    response_model=List[CarrierResponse],
    summary="List carriers",
    description="Retrieve the configured carriers with their underwriting thresholds",
)
async def list_carriers(
    engine: Annotated[RuleEngine, Depends(get_rule_engine)],
) -> List[CarrierResponse]:
    return [CarrierResponse.from_rule(carrier) for carrier in engine.carriers]


@router.get(
    "/{carrier_code}",
    response_model=CarrierResponse,
    summary="Get carrier by code",
)
async def get_carrier(
    carrier_code: str,
    engine: Annotated[RuleEngine, Depends(get_rule_engine)],
) -> CarrierResponse:
    try:
        carrier = engine.get_carrier(carrier_code)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    return CarrierResponse.from_rule(carrier)
