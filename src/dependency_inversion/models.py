"""Boundary model for vitals entered by hand (CLI)."""

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidReadingError


class VitalsReading(BaseModel):
    blood_pressure: int
    sugar_level: int

    @field_validator(*["blood_pressure", "sugar_level"])
    @classmethod
    def validate_non_negative(cls, value: int) -> int:
        if value < 0:
            raise InvalidReadingError(f"Cannot interpret {value!r} as a measured value.")
        return value
