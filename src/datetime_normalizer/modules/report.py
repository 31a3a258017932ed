"""Output formatting for parse results."""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def build_record(text, result=None, error=None):
    """Flatten one parse outcome into a dict for JSON output."""
    if result is not None:
        return {
            "input": text,
            "ok": True,
            "result": result.to_rfc3339(),
            "offset_minutes": result.offset_minutes,
            "strategy": result.strategy,
        }
    return {
        "input": text,
        "ok": False,
        "error": error.message,
        "kind": error.kind.value,
    }


def format_text(record, width=35):
    """Render a record as ``input____: result`` or ``input____: error: message``."""
    label = f"{record['input']:_<{width}}"
    if record["ok"]:
        return f"{label}: {record['result']}"
    return f"{label}: error: {record['error']}"


def format_json(record):
    """Render a record as a single JSON line."""
    return json.dumps(record, ensure_ascii=False)


def write_report(path, records):
    """Write all *records* to *path* as a formatted JSON array (UTF-8)."""
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(records, f, ensure_ascii=False, indent=2)
    logger.debug("Report: %s (%d records)", out_path, len(records))
