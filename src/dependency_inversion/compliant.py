"""
Dependency Inversion Principle: COMPLIANT

HealthMonitor depends on the Notifier abstraction, injected at construction. SMS, WhatsApp, or a test double
plug in without touching the health logic.
"""

import logging
from typing import Protocol

from src.dependency_inversion.models import VitalsReading

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    def send(self, patient_id: int, message: str) -> None: ...


class SmsNotifier:
    def send(self, patient_id: int, message: str) -> None:
        print(f"📩 Sending SMS for {patient_id}: {message}")


class WhatsAppNotifier:
    def send(self, patient_id: int, message: str) -> None:
        print(f"📩 Sending whatsapp message for {patient_id}: {message}")


class HealthMonitor:
    BLOOD_PRESSURE_THRESHOLD = 140
    SUGAR_LEVEL_THRESHOLD = 250

    def __init__(self, patient_id: int, notifier: Notifier) -> None:
        self.patient_id = patient_id
        self.notifier = notifier

    def check_health(self, blood_pressure: int, sugar_level: int) -> bool:
        """
        Send one alert if either reading is above its threshold (strictly), nothing otherwise.

        Returns whether an alert was sent.
        """
        if (
            blood_pressure > self.BLOOD_PRESSURE_THRESHOLD
            or sugar_level > self.SUGAR_LEVEL_THRESHOLD
        ):
            alert = f"{self.patient_id} has abnormal vitals! BP: {blood_pressure}, Sugar: {sugar_level}"
            logger.info("Alerting for patient %s", self.patient_id)
            self.notifier.send(self.patient_id, alert)
            return True

        print(f"{self.patient_id}'s vitals are normal.")
        return False

    def check_reading(self, reading: VitalsReading) -> bool:
        return self.check_health(reading.blood_pressure, reading.sugar_level)


def main(patient_id: int = 124, notifier: Notifier | None = None) -> None:
    monitor = HealthMonitor(patient_id, notifier or SmsNotifier())
    monitor.check_health(blood_pressure=150, sugar_level=260)  # alert
    monitor.check_health(blood_pressure=120, sugar_level=100)  # no alert


if __name__ == "__main__":
    main()
