from pydantic import BaseModel, field_validator, model_validator
from typing import Optional, List


class OpeningDimensions(BaseModel):
    width: float
    height: float

    class Config:
        frozen = True


class CalculateRequest(BaseModel):
    """Raw form text. Numbers are accepted and stringified."""
    width: Optional[str] = None
    height: Optional[str] = None

    @field_validator("width", "height", mode="before")
    @classmethod
    def _stringify(cls, value):
        if value is None or isinstance(value, str):
            return value
        return str(value)


class CutItem(BaseModel):
    section: str
    description: str
    length_inches: Optional[float] = None
    display: str
    quantity: int

    class Config:
        frozen = True


class RawLengths(BaseModel):
    """Unformatted decimal inches, before eighths formatting. None when infinite."""
    top_bottom_track: Optional[float] = None
    side_track: Optional[float] = None
    handle_interlock: Optional[float] = None
    top_bearing_bottom: Optional[float] = None
    glass_width: Optional[float] = None
    glass_height: Optional[float] = None

    class Config:
        frozen = True


class ComputedDimensions(BaseModel):
    top_bottom_track: str
    side_track: str
    handle_interlock: str
    top_bearing_bottom: str
    glass_width: str
    glass_height: str
    glass_dimensions: str
    raw: RawLengths
    cut_list: List[CutItem] = []

    class Config:
        frozen = True


class CalculationOutcome(BaseModel):
    """Exactly one of result / error is set."""
    result: Optional[ComputedDimensions] = None
    error: Optional[str] = None

    class Config:
        frozen = True

    @model_validator(mode="after")
    def _one_of_result_or_error(self):
        if (self.result is None) == (self.error is None):
            raise ValueError("CalculationOutcome needs exactly one of result or error")
        return self

    @property
    def ok(self) -> bool:
        return self.result is not None


class DimensionRules(BaseModel):
    handle_interlock_deduction: float
    top_bearing_bottom_deduction: float
    glass_height_deduction: float
    glass_width_allowance: float
    shutter_count: int
    pane_count: int
