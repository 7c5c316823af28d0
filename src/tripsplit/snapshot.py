"""Reading and writing trip snapshot files."""

import logging
from pathlib import Path

from pydantic import ValidationError

from .exceptions import SnapshotError
from .models import TripSnapshot

logger = logging.getLogger(__name__)


def load_snapshot(path: Path) -> TripSnapshot:
    """
    Load a trip snapshot from a JSON file.

    The file holds ``{"trip": {...}, "travellers": [...]}``.

    Args:
        path: Location of the snapshot file

    Returns:
        The parsed snapshot

    Raises:
        SnapshotError: If the file is missing, unreadable or invalid
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SnapshotError(str(path), f"Cannot read snapshot {path}: {e}") from e

    try:
        snapshot = TripSnapshot.model_validate_json(raw)
    except ValidationError as e:
        raise SnapshotError(str(path), f"Invalid snapshot {path}:\n{e}") from e

    logger.debug(
        f"Loaded snapshot '{snapshot.trip.name}' with "
        f"{len(snapshot.travellers)} travellers and "
        f"{len(snapshot.trip.expenses)} expenses"
    )

    return snapshot


def dump_snapshot(snapshot: TripSnapshot, path: Path) -> None:
    """Write a trip snapshot to ``path`` as indented JSON."""
    path.write_text(snapshot.model_dump_json(indent=2), encoding="utf-8")
    logger.debug(f"Wrote snapshot '{snapshot.trip.name}' to {path}")
