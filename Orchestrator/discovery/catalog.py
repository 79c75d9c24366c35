import os
from dataclasses import dataclass
from typing import Optional

from Orchestrator.config import config
from Orchestrator.runtime import log_event
from .apps_folder import find_apps_folder, launcher_base_dir, list_candidates
from .resolver import best_match

KNOWN_APPLICATIONS = ("PowerStig Converter UI", "MOF Inspector")


@dataclass
class LogicalApplication:
    display_name: str
    resolved_path: Optional[str] = None
    match_confidence: int = 0

    def is_available(self):
        """Re-check on every call; the file may have moved since discovery."""
        return bool(self.resolved_path) and os.path.isfile(self.resolved_path)

    def label(self):
        if self.is_available():
            return self.display_name
        return f"{self.display_name} (not found)"


def known_applications():
    raw = str(getattr(config, "known_apps", "") or "")
    names = [n.strip() for n in raw.split(",") if n.strip()]
    return tuple(names) if names else KNOWN_APPLICATIONS


def resolve_application(display_name, candidates):
    path, confidence = best_match(candidates, display_name)
    if path and not os.path.isfile(path):
        path = None
    return LogicalApplication(display_name=display_name, resolved_path=path, match_confidence=confidence)


def discover(base_dir=None, names=None, current_executable=None):
    """
    Run the single discovery pass: locate the Apps folder and resolve every
    known application against its executables.
    """
    names = tuple(names) if names else known_applications()
    start = base_dir if base_dir is not None else launcher_base_dir()
    folder = find_apps_folder(start)
    if folder is None:
        log_event("discovery_no_apps_folder", start_dir=str(start))
        return [LogicalApplication(display_name=n) for n in names]

    candidates = list_candidates(folder, current_executable=current_executable)
    apps = []
    for name in names:
        app = resolve_application(name, candidates)
        log_event(
            "discovery",
            app=name,
            path=app.resolved_path or "",
            confidence=app.match_confidence,
            candidates=len(candidates),
        )
        apps.append(app)
    return apps
