"""JSON reading for definition repositories."""
from __future__ import annotations

import json
import logging
from pathlib import Path

from .errors import DataLoadError

logger = logging.getLogger(__name__)


def load_json(path: Path) -> object:
    """Parse ``path`` as UTF-8 JSON; any failure surfaces as DataLoadError."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise DataLoadError(path, "Definition file not found") from exc
    except OSError as exc:
        raise DataLoadError(path, f"Unable to read definition file ({exc.strerror})") from exc

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DataLoadError(path, f"Invalid JSON at line {exc.lineno} column {exc.colno}") from exc
    logger.debug("Loaded %d definitions from %s", len(payload) if isinstance(payload, dict) else 0, path)
    return payload
