"""
Readiness probes for a freshly started process.

A probe answers three questions about one process: has it exited, does it
own a visible top-level window, and does it report input idle within a
short timeout. Any of them may raise; the supervisor treats a raising probe
as "not ready yet".
"""

import os

import psutil


class ReadinessProbe:
    """Exit detection only; window and idle signals never fire."""

    def __init__(self, proc):
        self.proc = proc

    @property
    def pid(self):
        return self.proc.pid

    def has_exited(self):
        return self.proc.poll() is not None

    def has_main_window(self):
        return False

    def wait_for_input_idle(self, timeout_s):
        return False

    def close(self):
        pass


class PosixReadinessProbe(ReadinessProbe):
    """
    No portable window or input-idle query exists off Windows, so only exit
    is detected. A child that already died but is not reaped yet, or one
    psutil can no longer find, counts as exited.
    """

    def __init__(self, proc):
        super().__init__(proc)
        self._ps = None

    def _process(self):
        if self._ps is None:
            self._ps = psutil.Process(self.pid)
        return self._ps

    def has_exited(self):
        if super().has_exited():
            return True
        try:
            return self._process().status() == psutil.STATUS_ZOMBIE
        except psutil.NoSuchProcess:
            return True

    def close(self):
        self._ps = None


class WindowsReadinessProbe(ReadinessProbe):
    """Top-level window lookup and WaitForInputIdle through pywin32."""

    def __init__(self, proc):
        super().__init__(proc)
        import win32api
        import win32con
        import win32event
        import win32gui
        import win32process

        self._win32api = win32api
        self._win32con = win32con
        self._win32event = win32event
        self._win32gui = win32gui
        self._win32process = win32process
        self._handle = None

    def _process_handle(self):
        if self._handle is None:
            access = self._win32con.SYNCHRONIZE | self._win32con.PROCESS_QUERY_INFORMATION
            self._handle = self._win32api.OpenProcess(access, False, self.pid)
        return self._handle

    def has_main_window(self):
        gui = self._win32gui
        found = []

        def callback(hwnd, _):
            _, found_pid = self._win32process.GetWindowThreadProcessId(hwnd)
            # Unowned and visible means a main window, not a tool or dialog.
            if found_pid == self.pid and gui.IsWindowVisible(hwnd) and not gui.GetWindow(hwnd, self._win32con.GW_OWNER):
                found.append(hwnd)
            return True

        gui.EnumWindows(callback, None)
        return bool(found)

    def wait_for_input_idle(self, timeout_s):
        ms = max(0, int(float(timeout_s) * 1000))
        # WAIT_TIMEOUT and failures (console apps have no message queue) both mean "not idle".
        return self._win32event.WaitForInputIdle(self._process_handle(), ms) == 0

    def close(self):
        if self._handle is not None:
            try:
                self._handle.Close()
            finally:
                self._handle = None


def default_probe_factory(proc):
    if os.name == "nt":
        return WindowsReadinessProbe(proc)
    return PosixReadinessProbe(proc)
