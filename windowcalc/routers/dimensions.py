"""
Dimensions API: the form posts the raw opening size, gets back cut lengths.

POST /api/dimensions/calculate  Validate the opening and compute component dimensions
GET  /api/dimensions/rules      Fixed clearance rules used by the calculator
"""

from fastapi import APIRouter, HTTPException

from .. import schemas
from ..calculators.sliding_window import SlidingWindowCalculator

router = APIRouter(prefix="/dimensions", tags=["dimensions"])

# Singleton calculator, no state between requests
calculator = SlidingWindowCalculator()


@router.post("/calculate", response_model=schemas.ComputedDimensions)
def calculate_dimensions(request: schemas.CalculateRequest):
    """
    Run the sliding window calculator on the raw form text.

    Returns 400 with the user-facing message when either value is not a
    positive number.
    """
    outcome = calculator.calculate(request.width, request.height)
    if not outcome.ok:
        raise HTTPException(status_code=400, detail=outcome.error)
    return outcome.result


@router.get("/rules", response_model=schemas.DimensionRules)
def get_rules():
    return calculator.rules()
