"""Data service - backup export, restore and reset.

The backup format is a single JSON document::

    {"tasks": [...], "notes": [...], "exportDate": "<ISO-8601>", "version": "1.0"}

Only ``tasks`` and ``notes`` are required on import; ``exportDate`` and
``version`` are informational.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from studyplan_cli.models import (
    SNAPSHOT_VERSION,
    InvalidFormatError,
    Note,
    ParseFailureError,
    Snapshot,
    Task,
)
from studyplan_cli.services.planner_state import PlannerState
from studyplan_cli.utils.id_utils import new_id
from studyplan_cli.utils.logger import get_logger


def default_export_filename(now: datetime | None = None) -> str:
    """Backup filename for the given day, e.g. study-planner-backup-2024-01-05.json."""
    now = now or datetime.now(UTC)
    return f"study-planner-backup-{now.date().isoformat()}.json"


class DataService:
    """Service for exporting, importing and clearing planner data."""

    def __init__(self, state: PlannerState):
        self.state = state

    def export_snapshot(self) -> Snapshot:
        """Build a backup document of both collections."""
        return Snapshot(
            tasks=list(self.state.tasks),
            notes=list(self.state.notes),
            export_date=datetime.now(UTC),
            version=SNAPSHOT_VERSION,
        )

    def export_json(self, indent: int | None = 2) -> str:
        """Render the backup document as JSON text."""
        return json.dumps(self.export_snapshot().to_json_dict(), indent=indent)

    def write_export(self, path: str | Path | None = None) -> Path:
        """Write the backup document to a file.

        Args:
            path: Destination file; defaults to
                ``study-planner-backup-<date>.json`` in the current directory

        Returns:
            Path of the written file
        """
        output_path = Path(path) if path else Path(default_export_filename())
        output_path.write_text(self.export_json(), encoding="utf-8")
        get_logger().info(
            "exported %d tasks and %d notes to %s",
            len(self.state.tasks),
            len(self.state.notes),
            output_path,
        )
        return output_path

    def import_snapshot(self, doc: Any) -> tuple[list[Task], list[Note]]:
        """Replace both collections with the contents of a backup document.

        Only the document shape is checked strictly. Entries are accepted
        leniently: a missing ``id`` or timestamp is filled in, fields with
        unusable values fall back to their defaults, and an entry that still
        lacks a usable title (or ``taskId`` for notes) is skipped.

        Args:
            doc: Parsed backup document or a Snapshot

        Returns:
            The new ``(tasks, notes)`` collections

        Raises:
            InvalidFormatError: If ``doc`` is not an object with ``tasks`` and
                ``notes`` arrays of objects. Existing data is left untouched.
        """
        if isinstance(doc, Snapshot):
            doc = doc.model_dump()
        if not isinstance(doc, Mapping):
            raise InvalidFormatError("backup document must be a JSON object")

        missing = [key for key in ("tasks", "notes") if doc.get(key) is None]
        if missing:
            raise InvalidFormatError(
                f"backup document is missing required keys: {', '.join(missing)}"
            )

        now = datetime.now(UTC)
        tasks = _coerce_entries(Task, doc["tasks"], "tasks", now)
        notes = _coerce_entries(Note, doc["notes"], "notes", now)

        self.state.replace(tasks, notes)
        get_logger().info("imported %d tasks and %d notes", len(tasks), len(notes))
        return self.state.tasks, self.state.notes

    def import_json(self, text: str | bytes) -> tuple[list[Task], list[Note]]:
        """Parse JSON text and import it.

        Raises:
            ParseFailureError: If ``text`` is not valid JSON
            InvalidFormatError: If the JSON is not a valid backup document
        """
        return self.import_snapshot(parse_document(text))

    def import_file(self, path: str | Path) -> tuple[list[Task], list[Note]]:
        """Read a backup file and import it.

        Raises:
            FileNotFoundError: If the file does not exist
            ParseFailureError: If the file is not valid JSON
            InvalidFormatError: If the JSON is not a valid backup document
        """
        return self.import_snapshot(read_document(path))

    def clear_all(self) -> None:
        """Delete every task and note."""
        self.state.replace([], [])
        get_logger().info("all planner data cleared")


def parse_document(text: str | bytes) -> Any:
    """Parse backup JSON text without validating its shape.

    Raises:
        ParseFailureError: If ``text`` is not valid JSON
    """
    try:
        return json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParseFailureError(f"not a valid JSON document: {e}") from e


def read_document(path: str | Path) -> Any:
    """Read and parse a backup file.

    Raises:
        FileNotFoundError: If the file does not exist
        ParseFailureError: If the file is not valid JSON
    """
    return parse_document(Path(path).read_bytes())


def _with_defaults(entry: Mapping[str, Any], now: datetime) -> dict[str, Any]:
    """Fill in the id and timestamps an imported entry may lack."""
    data = dict(entry)

    def present(name: str) -> bool:
        return name in data or to_camel(name) in data

    if not present("id"):
        data["id"] = new_id()
    if not present("created_at"):
        data["createdAt"] = now
    if not present("updated_at"):
        data["updatedAt"] = data.get("createdAt", data.get("created_at"))
    return data


def _coerce_entries(
    model: type[Task] | type[Note], entries: Any, kind: str, now: datetime
) -> list:
    """Validate imported entries into models, repairing what can be repaired.

    Raises:
        InvalidFormatError: If ``entries`` is not an array of objects
    """
    if not isinstance(entries, list):
        raise InvalidFormatError(f"backup {kind} must be an array")

    result = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            raise InvalidFormatError(f"backup {kind}[{index}] is not an object")

        data = _with_defaults(entry, now)
        try:
            result.append(model.model_validate(data))
            continue
        except ValidationError as e:
            bad = {err["loc"][0] for err in e.errors() if err["loc"]}

        # Drop the offending fields so their defaults apply
        cleaned = {
            key: value
            for key, value in data.items()
            if key not in bad and to_camel(key) not in bad
        }
        try:
            result.append(model.model_validate(_with_defaults(cleaned, now)))
            get_logger().info(
                "%s[%d] imported with defaults for: %s", kind, index, ", ".join(sorted(bad))
            )
        except ValidationError:
            get_logger().warning(
                "%s[%d] skipped: required fields missing or invalid", kind, index
            )
    return result
