"""
CLI entry point: one command per principle, each running the fixed demonstration of either variant.

    solid-examples srp --violation
    solid-examples dip --notifier whatsapp --blood-pressure 150 --sugar-level 90
"""

from enum import StrEnum
from typing import Optional

import typer
from pydantic import ValidationError

from src.core.config import get_settings
from src.core.exceptions import (
    ConfigurationError,
    InvalidReadingError,
    UnsupportedOperationError,
)
from src.core.log_config import configure_logging
from src.dependency_inversion import compliant as dip_compliant
from src.dependency_inversion import violation as dip_violation
from src.dependency_inversion.models import VitalsReading
from src.interface_segregation import compliant as isp_compliant
from src.interface_segregation import violation as isp_violation
from src.liskov_substitution import compliant as lsp_compliant
from src.liskov_substitution import violation as lsp_violation
from src.open_closed import compliant as ocp_compliant
from src.open_closed import violation as ocp_violation
from src.single_responsibility import compliant as srp_compliant
from src.single_responsibility import violation as srp_violation
from src.single_responsibility.wiring import open_game_settings_coordinator

app = typer.Typer(
    name="solid-examples",
    help="SOLID design principles, each shown as a violation and a compliant variant.",
    add_completion=False,
)


class NotifierChoice(StrEnum):
    SMS = "sms"
    WHATSAPP = "whatsapp"


# Options are module-level singletons to avoid function calls in the defaults (B008)
_VARIANT_OPTION = typer.Option(
    False,
    "--violation/--compliant",
    help="Run the violating variant instead of the compliant one.",
)
_NOTIFIER_OPTION = typer.Option(
    None,
    help="How the compliant monitor delivers alerts (default: sms). Not available with --violation.",
)
_BLOOD_PRESSURE_OPTION = typer.Option(
    None, help="Check this reading instead of running the fixed scenario."
)
_SUGAR_LEVEL_OPTION = typer.Option(
    None, help="Check this reading instead of running the fixed scenario."
)


@app.callback()
def setup() -> None:
    """Configure logging from the settings before any command runs."""
    try:
        settings = get_settings()
    except ValidationError as exc:
        typer.echo(f"Invalid settings:\n{exc}", err=True)
        raise typer.Exit(code=2) from exc
    configure_logging(settings.log_level)


@app.command()
def srp(violation: bool = _VARIANT_OPTION) -> None:
    """Single Responsibility: game settings access."""
    settings = get_settings()
    if violation:
        srp_violation.main(settings.player_id)
        return

    try:
        with open_game_settings_coordinator(settings) as coordinator:
            srp_compliant.main(coordinator, player_id=settings.player_id)
    except ConfigurationError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc


@app.command()
def ocp(violation: bool = _VARIANT_OPTION) -> None:
    """Open/Closed: message rendering."""
    if violation:
        ocp_violation.main()
    else:
        ocp_compliant.main()


@app.command()
def lsp(violation: bool = _VARIANT_OPTION) -> None:
    """Liskov Substitution: video playback. The violation ends with an unsupported operation."""
    if not violation:
        lsp_compliant.main()
        return

    try:
        lsp_violation.main()
    except UnsupportedOperationError as exc:
        typer.echo(f"UnsupportedOperationError: {exc}", err=True)
        raise typer.Exit(code=1) from exc


@app.command()
def isp(violation: bool = _VARIANT_OPTION) -> None:
    """Interface Segregation: RTC engine capabilities."""
    if violation:
        isp_violation.main()
    else:
        isp_compliant.main()


@app.command()
def dip(
    violation: bool = _VARIANT_OPTION,
    notifier: Optional[NotifierChoice] = _NOTIFIER_OPTION,
    blood_pressure: Optional[int] = _BLOOD_PRESSURE_OPTION,
    sugar_level: Optional[int] = _SUGAR_LEVEL_OPTION,
) -> None:
    """Dependency Inversion: health alerting."""
    if violation and notifier is not None:
        typer.echo(
            "--notifier needs the compliant variant: the violating monitor can only send SMS.",
            err=True,
        )
        raise typer.Exit(code=2)

    patient_id = get_settings().patient_id

    if blood_pressure is None and sugar_level is None:
        if violation:
            dip_violation.main(patient_id)
        else:
            dip_compliant.main(patient_id, _build_notifier(notifier))
        return

    if blood_pressure is None or sugar_level is None:
        typer.echo("Pass both --blood-pressure and --sugar-level.", err=True)
        raise typer.Exit(code=2)

    try:
        reading = VitalsReading(blood_pressure=blood_pressure, sugar_level=sugar_level)
    except InvalidReadingError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc

    if violation:
        monitor = dip_violation.HealthMonitor(patient_id, dip_violation.MessageNotifier())
        monitor.check_health(reading.blood_pressure, reading.sugar_level)
    else:
        monitor = dip_compliant.HealthMonitor(patient_id, _build_notifier(notifier))
        monitor.check_reading(reading)


def _build_notifier(choice: Optional[NotifierChoice]) -> dip_compliant.Notifier:
    if choice == NotifierChoice.WHATSAPP:
        return dip_compliant.WhatsAppNotifier()
    return dip_compliant.SmsNotifier()


if __name__ == "__main__":
    app()
