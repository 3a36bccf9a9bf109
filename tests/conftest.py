"""
Pytest Configuration and Fixtures

Shared fixtures for the BP calculator tests.
"""
import pytest
import httpx
from pathlib import Path
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from bp_calculator.services import BloodPressureService


@pytest.fixture
def bp_service() -> BloodPressureService:
    """Stateless service instance."""
    return BloodPressureService()


@pytest.fixture
def valid_categories() -> list:
    """The four category names as returned by the classifier."""
    return ["Low", "Ideal", "PreHigh", "High"]


@pytest.fixture
async def async_client():
    """Create async test client bound to the ASGI app."""
    from bp_calculator.main import app

    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://test"
    ) as client:
        yield client
