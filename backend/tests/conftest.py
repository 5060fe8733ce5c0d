"""Pytest fixtures for testing"""

from dataclasses import replace
from typing import Callable, Generator
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from carrier_intake.core.enums import CarrierCode, ProductType
from carrier_intake.deps import get_notifier, get_rule_engine, get_session
from carrier_intake.main import app
from carrier_intake.models.domain.applicant import ApplicantRecord
from carrier_intake.models.domain.carrier import CarrierRule
from carrier_intake.services.rule_engine import DEFAULT_CARRIER_TABLE, RuleEngine


@pytest.fixture
def engine() -> RuleEngine:
    """Rule engine over the full carrier table with tiered status"""
    return RuleEngine()


@pytest.fixture
def carriers() -> dict[CarrierCode, CarrierRule]:
    """Carrier table keyed by code"""
    return {carrier.code: carrier for carrier in DEFAULT_CARRIER_TABLE}


@pytest.fixture
def applicant() -> ApplicantRecord:
    """Healthy 40 year old asking for $500,000 of Term coverage"""
    return ApplicantRecord(
        age=40,
        sex="Male",
        height_in=70,
        weight_lb=190,
        bmi=27.3,
        annual_income=100_000,
        coverage=500_000,
        product_type=ProductType.TERM,
        term_years=20,
        state="TX",
    )


@pytest.fixture
def make_applicant(applicant: ApplicantRecord) -> Callable[..., ApplicantRecord]:
    """Build a variant of the default applicant"""

    def _make(**changes) -> ApplicantRecord:
        return replace(applicant, **changes)

    return _make


@pytest.fixture
def intake_form() -> dict:
    """Intake form payload as posted by the web form (camelCase, string values)"""
    return {
        "firstName": "Jane",
        "lastName": "Doe",
        "email": "jane.doe@example.com",
        "phone": "555-0100",
        "state": "TX",
        "age": "45",
        "sex": "Female",
        "heightIn": "65",
        "weightLb": "150",
        "annualIncome": "120000",
        "coverage": "750000",
        "productType": "Term",
        "termYears": "20",
        "tobaccoUse": "No",
        "medications": "",
        "doctorNames": "",
        "hazardousOccupation": "No",
        "avocationRisk": "No",
        "travelHighRisk": "No",
        "uncontrolledDiabetes": "No",
        "uncontrolledHypertension": "No",
        "insulinDependent": "No",
        "copd": "No",
    }


@pytest.fixture
def db_session() -> MagicMock:
    """Async session double recording adds and commits"""
    session = MagicMock()
    session.add = MagicMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.execute = AsyncMock()
    return session


@pytest.fixture
def notifier() -> MagicMock:
    """Notifier double that reports successful delivery"""
    mock = MagicMock()
    mock.send = AsyncMock(return_value=True)
    return mock


@pytest.fixture
def client(db_session: MagicMock, notifier: MagicMock) -> Generator[TestClient, None, None]:
    """Create FastAPI test client with session and notifier overrides"""

    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_notifier] = lambda: notifier
    app.dependency_overrides[get_rule_engine] = lambda: RuleEngine()
    yield TestClient(app)
    app.dependency_overrides.clear()
