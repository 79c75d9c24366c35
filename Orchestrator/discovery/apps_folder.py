import os
import stat
import sys
from pathlib import Path

import psutil

from Orchestrator.config import config
from .resolver import CandidateExecutable


def launcher_base_dir():
    """
    Directory the launcher runs from: the frozen executable's folder when
    bundled, otherwise the repository root next to main.py.
    """
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parents[2]


def current_executable_name():
    try:
        exe = psutil.Process().exe()
    except (psutil.Error, OSError):
        exe = ""
    return os.path.basename(exe or sys.executable or "")


def find_apps_folder(start_dir, folder_name=None):
    """Walk up from start_dir and return the first '<dir>/Apps' folder, or None."""
    name = folder_name or getattr(config, "apps_folder_name", "Apps")
    try:
        current = Path(start_dir).resolve()
    except (OSError, RuntimeError):
        return None
    for directory in (current, *current.parents):
        candidate = directory / name
        if candidate.is_dir():
            return candidate
    return None


def _extensions():
    raw = str(getattr(config, "executable_extensions", ".exe") or "")
    out = set()
    for part in raw.split(","):
        part = part.strip().lower()
        if not part:
            continue
        out.add(part if part.startswith(".") else "." + part)
    return out


def is_executable_file(path, windows=None):
    if windows is None:
        windows = os.name == "nt"
    try:
        st = path.stat()
    except OSError:
        return False
    if not stat.S_ISREG(st.st_mode):
        return False
    if windows:
        return path.suffix.lower() in _extensions()
    return bool(st.st_mode & (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH))


def list_candidates(folder, current_executable=None, windows=None):
    """
    Immediate (non-recursive) executables in folder, excluding the running
    launcher itself by file name (case-insensitive).
    """
    if folder is None:
        return []
    folder = Path(folder)
    if current_executable is None:
        current_executable = current_executable_name()
    skip = str(current_executable or "").lower()
    try:
        entries = sorted(folder.iterdir(), key=lambda p: p.name.lower())
    except OSError:
        return []
    out = []
    for path in entries:
        if skip and path.name.lower() == skip:
            continue
        if not is_executable_file(path, windows=windows):
            continue
        out.append(CandidateExecutable.from_path(path))
    return out
