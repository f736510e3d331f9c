"""JSON helpers used to persist adjustment sidecars."""

from __future__ import annotations

import json
import os
import time
from pathlib import Path
from typing import Any

from ..errors import AdjustmentFileError


def read_json(path: Path) -> dict[str, Any]:
    """Read the JSON object stored at *path*."""

    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except FileNotFoundError as exc:
        raise AdjustmentFileError(f"JSON file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise AdjustmentFileError(f"Invalid JSON data in {path}") from exc
    if not isinstance(data, dict):
        raise AdjustmentFileError(f"Expected a JSON object in {path}")
    return data


def atomic_write_text(path: Path, data: str) -> None:
    """Write *data* into *path* through a temporary file and an atomic swap."""

    tmp_path = path.with_suffix(path.suffix + ".tmp")
    path.parent.mkdir(parents=True, exist_ok=True)
    with tmp_path.open("w", encoding="utf-8") as handle:
        handle.write(data)
        handle.flush()
        os.fsync(handle.fileno())
    # Windows occasionally refuses the rename while another process (indexers,
    # antivirus) holds a handle on either file; retry with a short back-off.
    for attempt in range(5):
        try:
            tmp_path.replace(path)
            return
        except PermissionError:
            if attempt == 4:
                tmp_path.unlink(missing_ok=True)
                raise
            time.sleep(0.05 * (attempt + 1))


def write_json(path: Path, data: dict[str, Any]) -> None:
    """Serialise *data* as indented JSON and write it atomically to *path*."""

    payload = json.dumps(data, ensure_ascii=False, indent=2, sort_keys=True)
    atomic_write_text(path, payload)
