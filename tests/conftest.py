"""
Shared test fixtures: test client, calculator instance.
"""

import pytest
from fastapi.testclient import TestClient

from windowcalc.calculators.sliding_window import SlidingWindowCalculator
from windowcalc.main import app


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def calc():
    """Fresh sliding window calculator."""
    return SlidingWindowCalculator()
