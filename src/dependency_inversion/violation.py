"""
Dependency Inversion Principle: VIOLATION

The high-level HealthMonitor depends directly on the low-level MessageNotifier. Delivering alerts any other way
(WhatsApp, e-mail, a test double) means rewriting the health logic, because the concrete type is baked into it.
"""


class MessageNotifier:
    def send_message(self, patient_id: int, message: str) -> None:
        # here we could look up the patient's contacts and text them
        print(f"📩 Sending SMS: {message}")


class HealthMonitor:
    BLOOD_PRESSURE_THRESHOLD = 140
    SUGAR_LEVEL_THRESHOLD = 250

    def __init__(self, patient_id: int, notifier: MessageNotifier) -> None:
        self.patient_id = patient_id
        self.notifier = notifier

    def check_health(self, blood_pressure: int, sugar_level: int) -> None:
        """Alert through SMS if either reading is above its threshold."""
        if (
            blood_pressure > self.BLOOD_PRESSURE_THRESHOLD
            or sugar_level > self.SUGAR_LEVEL_THRESHOLD
        ):
            alert = f"{self.patient_id} has abnormal vitals! BP: {blood_pressure}, Sugar: {sugar_level}"
            self.notifier.send_message(self.patient_id, alert)
        else:
            print(f"{self.patient_id}'s vitals are normal.")


def main(patient_id: int = 124) -> None:
    monitor = HealthMonitor(patient_id, MessageNotifier())
    monitor.check_health(blood_pressure=150, sugar_level=260)  # alert
    monitor.check_health(blood_pressure=120, sugar_level=100)  # no alert


if __name__ == "__main__":
    main()
