import json
from pathlib import Path
from typing import Any, Dict, List, Optional

HISTORY_PATH = Path.home() / ".multibase_codec_history.jsonl"


def log_event(action: str, payload: Dict[str, Any], path: Optional[Path] = None) -> None:
    """
    Append a simple JSON line to history for traceability.
    """
    record = {"action": action, **payload}
    target = path or HISTORY_PATH
    try:
        with target.open("a", encoding="utf-8") as fh:
            fh.write(json.dumps(record, ensure_ascii=False) + "\n")
    except OSError:
        # History failures should not break core functionality.
        pass


def read_history(path: Optional[Path] = None, limit: int = 20) -> List[Dict[str, Any]]:
    target = path or HISTORY_PATH
    if not target.exists():
        return []
    records: List[Dict[str, Any]] = []
    for line in target.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line:
            continue
        try:
            records.append(json.loads(line))
        except ValueError:
            continue
    return records[-limit:] if limit > 0 else records
