import datetime
import json
import os
import threading
import uuid

from Orchestrator.config import config

_local = threading.local()


def set_launch_id(launch_id=None):
    _local.launch_id = str(launch_id or uuid.uuid4())
    return _local.launch_id


def get_launch_id():
    value = getattr(_local, "launch_id", "")
    return str(value or "")


def _enabled():
    return str(getattr(config, "runtime_log_enabled", "1")).lower() in ("1", "true", "yes", "on")


def _path():
    p = getattr(config, "runtime_log_path", "Orchestrator/data/runtime_events.jsonl")
    return os.path.abspath(str(p))


def log_event(event, **fields):
    if not _enabled():
        return False
    row = {
        "ts": datetime.datetime.now().isoformat(timespec="seconds"),
        "event": str(event or ""),
        "launch_id": get_launch_id(),
    }
    row.update(fields or {})
    path = _path()
    folder = os.path.dirname(path)
    try:
        if folder and not os.path.isdir(folder):
            os.makedirs(folder, exist_ok=True)
        with open(path, "a", encoding="utf-8") as f:
            f.write(json.dumps(row, ensure_ascii=False, default=str) + "\n")
    except OSError:
        return False
    return True
