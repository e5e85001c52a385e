import pytest
from fastapi.testclient import TestClient

from krishi_ai.core.genai_client import get_text_generator
from krishi_ai.main import app
from krishi_ai.models.soil_analysis import SoilInputs
from tests.stubs import StubTextGenerator


@pytest.fixture
def stub_generator():
    return StubTextGenerator()


@pytest.fixture
def client(stub_generator):
    app.dependency_overrides[get_text_generator] = lambda: stub_generator
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def balanced_soil():
    return SoilInputs(
        ph=6.5, nitrogen=300, phosphorus=30, potassium=50, organic_matter=1.2
    )


@pytest.fixture
def poor_soil():
    return SoilInputs(
        ph=5.2, nitrogen=180, phosphorus=15, potassium=25, organic_matter=0.4
    )
