import threading
import time

from Orchestrator.runtime import log_event, metrics_inc, metrics_observe_ms, set_launch_id
from .outcome import LaunchOutcome, LaunchProgress, LaunchState
from .supervisor import LaunchSupervisor


class LaunchSession:
    """
    One launch attempt and its state machine:

        IDLE -> VALIDATING -> STARTING -> POLLING -> READY | TIMED_OUT | NOT_FOUND | START_FAILED

    plus CANCELLED when cancel() is observed between poll iterations.
    The presentation layer only observes: it passes callbacks and reads
    `state`, `outcome` and `busy`. A session runs at most once.
    """

    def __init__(
        self,
        display_name,
        path,
        *,
        readiness_timeout=None,
        supervisor=None,
        on_state=None,
        on_progress=None,
        on_outcome=None,
    ):
        self.display_name = display_name
        self.path = path
        self.readiness_timeout = readiness_timeout
        self.supervisor = supervisor or LaunchSupervisor()
        self.on_state = on_state
        self.on_progress = on_progress
        self.on_outcome = on_outcome
        self.state = LaunchState.IDLE
        self.outcome = None
        self.last_progress = None
        self._cancel = threading.Event()
        self._lock = threading.Lock()
        self._started = False

    @property
    def busy(self):
        return self._started and not self.state.terminal

    def cancel(self):
        self._cancel.set()

    def _set_state(self, state):
        self.state = state
        if self.on_state is not None:
            self.on_state(state)

    def run(self):
        with self._lock:
            if self._started:
                raise RuntimeError("launch session already used")
            self._started = True

        set_launch_id()
        started = time.perf_counter()
        log_event("launch_start", app=self.display_name, path=str(self.path or ""))
        metrics_inc("launch_attempts_total", 1)

        outcome = None
        for item in self.supervisor.launch(
            self.path,
            self.readiness_timeout,
            on_state=self._set_state,
            cancel_event=self._cancel,
        ):
            if isinstance(item, LaunchProgress):
                self.last_progress = item
                if self.on_progress is not None:
                    self.on_progress(item)
            elif isinstance(item, LaunchOutcome):
                outcome = item

        self.outcome = outcome
        total_ms = int((time.perf_counter() - started) * 1000)
        metrics_inc(f"launch_{outcome.state.value}_total", 1)
        if outcome.state is LaunchState.READY:
            metrics_observe_ms("launch_ready_ms", total_ms)
        log_event(
            "launch_end",
            app=self.display_name,
            state=outcome.state.value,
            reason=outcome.reason,
            elapsed_ms=total_ms,
        )
        if self.on_outcome is not None:
            self.on_outcome(outcome)
        return outcome
