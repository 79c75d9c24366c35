"""
Start an external program and wait, best-effort, until its UI looks ready.

LaunchSupervisor.launch() is a generator: it yields LaunchProgress events
while polling and finishes with exactly one LaunchOutcome. It sleeps between
poll iterations, so it must run on a worker thread, never on the GUI thread.
"""

import os
import subprocess
import time

from Orchestrator.config import config
from .outcome import LaunchOutcome, LaunchProgress, LaunchState
from .probes import ReadinessProbe, default_probe_factory


def spawn_process(path):
    kwargs = {"cwd": os.path.dirname(path) or None, "shell": False}
    if os.name != "nt":
        # Keep the launched app alive when the launcher exits.
        kwargs["start_new_session"] = True
    return subprocess.Popen([path], **kwargs)


def _probe(fn, *args):
    try:
        return bool(fn(*args))
    except Exception:
        return False


def _ms(name, default):
    return max(0.0, float(getattr(config, name, default))) / 1000.0


class LaunchSupervisor:
    def __init__(
        self,
        *,
        spawn=None,
        probe_factory=None,
        clock=None,
        sleep=None,
        poll_interval_s=None,
        settle_delay_s=None,
        idle_probe_s=None,
        initial_idle_probe_s=None,
        progress_interval_s=None,
    ):
        self.spawn = spawn or spawn_process
        self.probe_factory = probe_factory or default_probe_factory
        self.clock = clock or time.monotonic
        self.sleep = sleep or time.sleep
        self.poll_interval_s = poll_interval_s if poll_interval_s is not None else _ms("poll_interval_ms", 250)
        self.settle_delay_s = settle_delay_s if settle_delay_s is not None else _ms("settle_delay_ms", 200)
        self.idle_probe_s = idle_probe_s if idle_probe_s is not None else _ms("idle_probe_ms", 250)
        self.initial_idle_probe_s = (
            initial_idle_probe_s if initial_idle_probe_s is not None else _ms("initial_idle_probe_ms", 100)
        )
        self.progress_interval_s = (
            progress_interval_s if progress_interval_s is not None else _ms("progress_interval_ms", 1000)
        )
        if self.progress_interval_s <= 0:
            self.progress_interval_s = 1.0

    def launch(self, path, readiness_timeout=None, *, on_state=None, cancel_event=None):
        """
        Yield LaunchProgress events, then one terminal LaunchOutcome.

        on_state(LaunchState) is called on every state transition;
        cancel_event (threading.Event-like) is checked between poll iterations.
        """
        if readiness_timeout is None:
            readiness_timeout = float(getattr(config, "readiness_timeout_s", 60))

        def _enter(state):
            if on_state is not None:
                on_state(state)

        _enter(LaunchState.VALIDATING)
        path = str(path or "").strip()
        if not path or not os.path.isfile(path):
            _enter(LaunchState.NOT_FOUND)
            yield LaunchOutcome.not_found(path)
            return

        _enter(LaunchState.STARTING)
        try:
            proc = self.spawn(path)
        except (OSError, ValueError, subprocess.SubprocessError) as e:
            _enter(LaunchState.START_FAILED)
            yield LaunchOutcome.start_failed(path, str(e) or e.__class__.__name__)
            return

        try:
            probe = self.probe_factory(proc)
        except Exception:
            probe = ReadinessProbe(proc)
        try:
            _enter(LaunchState.POLLING)
            outcome = yield from self._poll(path, probe, float(readiness_timeout), cancel_event)
        finally:
            _probe(probe.close)
            # Reaps a child that already exited; a running one is left alone.
            _probe(proc.poll)

        _enter(outcome.state)
        yield outcome

    def _poll(self, path, probe, timeout_s, cancel_event):
        start = self.clock()
        deadline = start + timeout_s
        next_progress = start + self.progress_interval_s

        yield LaunchProgress(0.0)

        # Some apps are idle almost immediately.
        if _probe(probe.wait_for_input_idle, self.initial_idle_probe_s):
            return LaunchOutcome.ready(path, self.clock() - start)

        while self.clock() < deadline:
            if cancel_event is not None and cancel_event.is_set():
                return LaunchOutcome.cancelled(path, self.clock() - start)

            if _probe(probe.has_exited):
                return LaunchOutcome.ready(path, self.clock() - start)

            if _probe(probe.has_main_window):
                self.sleep(self.settle_delay_s)
                return LaunchOutcome.ready(path, self.clock() - start)

            if _probe(probe.wait_for_input_idle, self.idle_probe_s):
                return LaunchOutcome.ready(path, self.clock() - start)

            now = self.clock()
            if now >= next_progress:
                yield LaunchProgress(now - start)
                while next_progress <= now:
                    next_progress += self.progress_interval_s

            remaining = deadline - self.clock()
            if remaining <= 0:
                break
            self.sleep(min(self.poll_interval_s, remaining))

        return LaunchOutcome.timed_out(path, self.clock() - start)


def launch(path, readiness_timeout=None, **kwargs):
    """Module-level shortcut with default process control and probes."""
    on_state = kwargs.pop("on_state", None)
    cancel_event = kwargs.pop("cancel_event", None)
    return LaunchSupervisor(**kwargs).launch(
        path, readiness_timeout, on_state=on_state, cancel_event=cancel_event
    )
