"""Unit tests for src/dependency_inversion/compliant.py"""

from unittest.mock import Mock

import pytest

from src.dependency_inversion.compliant import (
    HealthMonitor,
    SmsNotifier,
    WhatsAppNotifier,
    main,
)
from src.dependency_inversion.models import VitalsReading

PATIENT_ID = 124


class RecordingNotifier:
    """Notifier double: keeps what it was asked to send."""

    def __init__(self) -> None:
        self.sent: list[tuple[int, str]] = []

    def send(self, patient_id: int, message: str) -> None:
        self.sent.append((patient_id, message))


def test_abnormal_vitals_send_one_alert() -> None:
    notifier = RecordingNotifier()
    monitor = HealthMonitor(PATIENT_ID, notifier)

    assert monitor.check_health(blood_pressure=150, sugar_level=260) is True

    assert len(notifier.sent) == 1
    patient_id, message = notifier.sent[0]
    assert patient_id == PATIENT_ID
    assert message == "124 has abnormal vitals! BP: 150, Sugar: 260"


def test_normal_vitals_send_nothing(capsys: pytest.CaptureFixture[str]) -> None:
    notifier = RecordingNotifier()
    monitor = HealthMonitor(PATIENT_ID, notifier)

    assert monitor.check_health(blood_pressure=120, sugar_level=100) is False

    assert notifier.sent == []
    assert capsys.readouterr().out.strip() == "124's vitals are normal."


@pytest.mark.parametrize(
    "blood_pressure, sugar_level, alerts",
    [
        (140, 250, 0),  # thresholds themselves are fine (strictly greater alerts)
        (141, 250, 1),
        (140, 251, 1),
        (141, 251, 1),
        (0, 0, 0),
    ],
)
def test_thresholds(blood_pressure: int, sugar_level: int, alerts: int) -> None:
    notifier = RecordingNotifier()
    HealthMonitor(PATIENT_ID, notifier).check_health(blood_pressure, sugar_level)
    assert len(notifier.sent) == alerts


@pytest.mark.parametrize(
    "notifier_cls, expected",
    [
        (SmsNotifier, "📩 Sending SMS for 124: hello"),
        (WhatsAppNotifier, "📩 Sending whatsapp message for 124: hello"),
    ],
)
def test_notifiers(notifier_cls, expected: str, capsys: pytest.CaptureFixture[str]) -> None:
    notifier_cls().send(PATIENT_ID, "hello")
    assert capsys.readouterr().out.strip() == expected


def test_notifiers_are_interchangeable(capsys: pytest.CaptureFixture[str]) -> None:
    """Same monitor logic, different delivery: nothing in HealthMonitor changes."""
    for notifier in [SmsNotifier(), WhatsAppNotifier()]:
        HealthMonitor(PATIENT_ID, notifier).check_health(150, 100)
    output = capsys.readouterr().out.splitlines()
    assert output[0].startswith("📩 Sending SMS")
    assert output[1].startswith("📩 Sending whatsapp")


def test_check_reading() -> None:
    notifier = Mock()
    monitor = HealthMonitor(PATIENT_ID, notifier)
    assert monitor.check_reading(VitalsReading(blood_pressure=150, sugar_level=90)) is True
    notifier.send.assert_called_once_with(
        PATIENT_ID, "124 has abnormal vitals! BP: 150, Sugar: 90"
    )


def test_main(capsys: pytest.CaptureFixture[str]) -> None:
    notifier = RecordingNotifier()
    main(PATIENT_ID, notifier)
    assert len(notifier.sent) == 1
    assert capsys.readouterr().out.strip() == "124's vitals are normal."
