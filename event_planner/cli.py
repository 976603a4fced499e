"""Command-line interface for event planning."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from . import constraint_validator, dependency_validator
from .config import PlannerConfig
from .dtos import ScheduleRequest, ScheduleResponse
from .engine import schedule_events
from .event_csv import export_schedule_csv, import_events_csv
from .models import DEMO_EVENTS, Event
from .schedule_printer import format_schedule_for_printing
from .types import SchedulingResult

app = typer.Typer(
    name="event-planner",
    help="Pick the best non-conflicting set of events for attendance or revenue",
    no_args_is_help=True,
)


def setup_logging(verbose: bool = False, level: str = "INFO") -> None:
    """Configure logging based on verbosity."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _read_events(input_file: Path) -> tuple[list[Event], ScheduleRequest | None]:
    """Read events from a .json request or a .csv catalog."""
    if input_file.suffix.lower() == ".json":
        request = ScheduleRequest.model_validate_json(input_file.read_text(encoding="utf-8"))
        return request.to_events(), request
    return import_events_csv(input_file), None


def _report(result: SchedulingResult, output: Path | None, quiet: bool) -> None:
    if not result.ok:
        typer.echo(f"\n❌ {format_schedule_for_printing(result)}", err=True)
        raise typer.Exit(1)

    # Sanity check on the generated schedule
    is_valid, errors = constraint_validator.validate_and_report(result.events)
    if not is_valid:
        typer.echo(f"⚠️  Planner produced an invalid schedule: {errors[0]}", err=True)
        raise typer.Exit(1)

    typer.echo(format_schedule_for_printing(result))

    if output is not None:
        if output.suffix.lower() == ".json":
            output.write_text(
                ScheduleResponse.from_result(result).model_dump_json(indent=2),
                encoding="utf-8",
            )
        else:
            export_schedule_csv(result, output)
        if not quiet:
            typer.echo(f"\nSchedule saved to: {output.absolute()}")


ObjectiveOption = Annotated[
    str | None,
    typer.Option(
        "--objective",
        "-O",
        help="attendance, revenue or hybrid (or 1/2/3)",
    ),
]
AlphaOption = Annotated[
    float | None,
    typer.Option(
        "--alpha",
        "-a",
        help="Hybrid blend in [0, 1]; higher prioritizes attendance",
    ),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Enable verbose/debug logging"),
]


@app.command("schedule")
def schedule(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Event catalog (.csv) or schedule request (.json)",
            exists=True,
            readable=True,
        ),
    ],
    objective: ObjectiveOption = None,
    alpha: AlphaOption = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the schedule to .csv or .json"),
    ] = None,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress detailed output"),
    ] = False,
    verbose: VerboseOption = False,
) -> None:
    """Compute the best schedule for an event catalog."""
    config = PlannerConfig.from_env()
    setup_logging(verbose, config.log_level)

    try:
        events, request = _read_events(input_file)
    except (FileNotFoundError, ValueError) as e:
        typer.echo(f"Error reading {input_file}: {e}", err=True)
        raise typer.Exit(1)

    # Command-line options win over the request file, which wins over the environment
    chosen_objective = objective or (request.objective.value if request else config.objective)
    chosen_alpha = alpha if alpha is not None else (request.alpha if request else config.alpha)

    if not quiet:
        typer.echo(f"Loaded {len(events)} events from {input_file}")
        typer.echo(f"Objective: {chosen_objective}")

    result = schedule_events(events, chosen_objective, chosen_alpha)
    _report(result, output, quiet)


@app.command("check")
def check(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Event catalog (.csv) or schedule request (.json)",
            exists=True,
            readable=True,
        ),
    ],
    verbose: VerboseOption = False,
) -> None:
    """Validate a catalog's dependencies and timing without scheduling."""
    setup_logging(verbose, PlannerConfig.from_env().log_level)

    try:
        events, _ = _read_events(input_file)
    except (FileNotFoundError, ValueError) as e:
        typer.echo(f"Error reading {input_file}: {e}", err=True)
        raise typer.Exit(1)

    is_valid, errors = dependency_validator.validate_and_report(events)
    if not is_valid:
        for message in errors:
            typer.echo(f"❌ {message}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ {len(events)} events validated successfully")


@app.command("demo")
def demo(
    objective: ObjectiveOption = None,
    alpha: AlphaOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Run the predefined catalog with dependencies and venue conflicts."""
    config = PlannerConfig.from_env()
    setup_logging(verbose, config.log_level)

    typer.echo("Running predefined test case (includes dependencies & conflicts)...")
    for event in DEMO_EVENTS:
        typer.echo(f"  {event.describe()}")
    typer.echo("")

    result = schedule_events(
        DEMO_EVENTS,
        objective or config.objective,
        alpha if alpha is not None else config.alpha,
    )
    _report(result, None, quiet=True)


if __name__ == "__main__":
    app()
