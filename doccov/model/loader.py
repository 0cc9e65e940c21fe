"""Loading of documentation snapshots from YAML or JSON files.

A snapshot describes packages, types and members together with their
raw documentation comments. JSON is a subset of YAML, so a single
safe YAML load handles both formats.
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from doccov.model.structure import DocModel
from doccov.stats.base import SnapshotError

logger = logging.getLogger(__name__)


def parse_snapshot(data: Any, source: str = "<data>") -> DocModel:
    """Build a DocModel from already-decoded snapshot data.

    Args:
        data: Mapping with a ``packages`` list.
        source: Name of the origin, used in error messages.

    Returns:
        The documentation model.

    Raises:
        SnapshotError: If the data does not describe a valid snapshot.
    """
    if not isinstance(data, dict):
        raise SnapshotError(
            f"{source}: snapshot must be a mapping with a 'packages' list"
        )
    if not isinstance(data.get("packages", []), list):
        raise SnapshotError(f"{source}: 'packages' must be a list")

    try:
        model = DocModel.from_dict(data)
    except KeyError as e:
        raise SnapshotError(f"{source}: missing required key {e}") from e
    except (TypeError, ValueError, AttributeError) as e:
        raise SnapshotError(f"{source}: {e}") from e

    logger.debug(
        "Parsed %s: %d packages, %d types",
        source,
        len(model.packages),
        sum(len(p.types) for p in model.packages),
    )
    return model


def load_snapshot(file_path: str) -> DocModel:
    """Load a documentation snapshot file.

    Args:
        file_path: Path to a YAML or JSON snapshot.

    Returns:
        The documentation model.

    Raises:
        FileNotFoundError: If the file does not exist.
        SnapshotError: If the file is not a valid snapshot.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise SnapshotError(f"{file_path}: invalid YAML/JSON: {e}") from e

    model = parse_snapshot(data or {}, source=file_path)
    logger.info("Loaded snapshot %s", file_path)
    return model
