import os
from pathlib import Path

from dotenv import load_dotenv

# Load project-level .env so a deployment can tune timings without code changes.
_repo_root = Path(__file__).resolve().parents[2]
load_dotenv(_repo_root / ".env", override=False)


# Discovery
apps_folder_name = os.getenv("ORCH_APPS_FOLDER_NAME", "Apps")
known_apps = os.getenv("ORCH_KNOWN_APPS", "PowerStig Converter UI,MOF Inspector")
# Only consulted on Windows; POSIX uses the execute bit.
executable_extensions = os.getenv("ORCH_EXECUTABLE_EXTENSIONS", ".exe")
releases_url = os.getenv("ORCH_RELEASES_URL", "https://github.com/MrasmussenGit")


# Launch readiness
readiness_timeout_s = float(os.getenv("ORCH_READINESS_TIMEOUT_S", "60"))
poll_interval_ms = int(os.getenv("ORCH_POLL_INTERVAL_MS", "250"))
settle_delay_ms = int(os.getenv("ORCH_SETTLE_DELAY_MS", "200"))
idle_probe_ms = int(os.getenv("ORCH_IDLE_PROBE_MS", "250"))
initial_idle_probe_ms = int(os.getenv("ORCH_INITIAL_IDLE_PROBE_MS", "100"))
progress_interval_ms = int(os.getenv("ORCH_PROGRESS_INTERVAL_MS", "1000"))


# Runtime / ops
runtime_log_enabled = os.getenv("ORCH_LOG_ENABLED", "1")
runtime_log_path = os.getenv("ORCH_RUNTIME_LOG_PATH", "Orchestrator/data/runtime_events.jsonl")
runtime_metrics_path = os.getenv("ORCH_RUNTIME_METRICS_PATH", "Orchestrator/data/metrics_snapshot.json")
