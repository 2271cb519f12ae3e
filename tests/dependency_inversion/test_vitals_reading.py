"""Unit tests for src/dependency_inversion/models.py"""

import pytest

from src.core.exceptions import InvalidReadingError
from src.dependency_inversion.models import VitalsReading


def test_valid_reading() -> None:
    reading = VitalsReading(blood_pressure=120, sugar_level=0)
    assert reading.blood_pressure == 120
    assert reading.sugar_level == 0


@pytest.mark.parametrize(
    "blood_pressure, sugar_level",
    [(-1, 100), (120, -5)],
)
def test_negative_reading(blood_pressure: int, sugar_level: int) -> None:
    with pytest.raises(InvalidReadingError):
        _ = VitalsReading(blood_pressure=blood_pressure, sugar_level=sugar_level)
