import enum
from dataclasses import dataclass


class LaunchState(enum.Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    STARTING = "starting"
    POLLING = "polling"
    READY = "ready"
    TIMED_OUT = "timed_out"
    NOT_FOUND = "not_found"
    START_FAILED = "start_failed"
    CANCELLED = "cancelled"

    @property
    def terminal(self):
        return self in _TERMINAL


_TERMINAL = frozenset(
    {
        LaunchState.READY,
        LaunchState.TIMED_OUT,
        LaunchState.NOT_FOUND,
        LaunchState.START_FAILED,
        LaunchState.CANCELLED,
    }
)


def format_elapsed(seconds):
    total = max(0, int(seconds))
    minutes, secs = divmod(total, 60)
    return f"{minutes:02d}:{secs:02d}"


@dataclass(frozen=True)
class LaunchProgress:
    elapsed_s: float

    def elapsed_text(self):
        return format_elapsed(self.elapsed_s)


@dataclass(frozen=True)
class LaunchOutcome:
    state: LaunchState
    path: str = ""
    elapsed_s: float = 0.0
    reason: str = ""

    @property
    def started(self):
        return self.state in (LaunchState.READY, LaunchState.TIMED_OUT)

    @property
    def is_error(self):
        # TIMED_OUT is informational: the launcher proceeds as if ready.
        return self.state in (LaunchState.NOT_FOUND, LaunchState.START_FAILED)

    @classmethod
    def ready(cls, path, elapsed_s):
        return cls(LaunchState.READY, path=path, elapsed_s=elapsed_s)

    @classmethod
    def timed_out(cls, path, elapsed_s):
        return cls(LaunchState.TIMED_OUT, path=path, elapsed_s=elapsed_s)

    @classmethod
    def not_found(cls, path):
        return cls(LaunchState.NOT_FOUND, path=path or "")

    @classmethod
    def start_failed(cls, path, reason):
        return cls(LaunchState.START_FAILED, path=path, reason=str(reason or ""))

    @classmethod
    def cancelled(cls, path, elapsed_s):
        return cls(LaunchState.CANCELLED, path=path, elapsed_s=elapsed_s)
