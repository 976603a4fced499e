"""
CSV import of event catalogs and CSV export of schedules.

Rows are validated through EventRecord so a malformed file is reported with
its line number instead of failing deep inside the engine.
"""

import csv
import logging
from pathlib import Path

from .dtos import EventRecord
from .models import Event
from .types import SchedulingResult

logger = logging.getLogger(__name__)

CSV_FIELDS = [
    'id',
    'start',
    'end',
    'attendance',
    'revenue',
    'venue',
    'prerequisites',
]


def import_events_csv(csv_path: Path) -> list[Event]:
    """
    Import and validate an event catalog CSV.

    Args:
        csv_path: Path to the CSV file

    Returns:
        List of events in file order

    Raises:
        FileNotFoundError: If CSV file doesn't exist
        ValueError: If CSV is invalid or fails validation
    """
    if not csv_path.exists():
        raise FileNotFoundError(f"Event CSV not found: {csv_path}")

    events: list[Event] = []

    with csv_path.open('r', encoding='utf-8', newline='') as f:
        reader = csv.DictReader(f)

        if reader.fieldnames is None:
            raise ValueError("CSV file is empty or has no header")

        # prerequisites may be omitted entirely
        required_columns = set(CSV_FIELDS) - {'prerequisites'}
        missing_columns = required_columns - {name.strip() for name in reader.fieldnames}
        if missing_columns:
            raise ValueError(
                f"Missing required columns in CSV: {', '.join(sorted(missing_columns))}"
            )

        for line_num, row_dict in enumerate(reader, start=2):  # Start at 2 (header is 1)
            row = {k.strip(): v or '' for k, v in row_dict.items() if k}
            try:
                events.append(EventRecord.from_csv_dict(row).to_event())
            except (ValueError, KeyError) as e:
                raise ValueError(f"Validation error on line {line_num}: {e}") from e

    logger.info("Imported %d events from %s", len(events), csv_path)
    return events


def export_events_csv(events: list[Event], output_path: Path) -> None:
    """Write events in the same format import_events_csv reads."""
    with output_path.open('w', newline='', encoding='utf-8') as f:
        writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for event in events:
            writer.writerow(EventRecord.from_event(event).to_csv_dict())


def export_schedule_csv(result: SchedulingResult, output_path: Path) -> None:
    """
    Export the chosen events of a solved result, ordered by finish time.

    Raises:
        ValueError: If the result is a failure
    """
    if not result.ok:
        raise ValueError(f"Cannot export a failed schedule: {result.error}")

    export_events_csv(list(result.events), output_path)
    logger.info("Exported %d scheduled events to %s", len(result.events), output_path)
