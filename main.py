import sys
from typing import Any, cast

from PyQt5 import QtCore
from PyQt5.QtCore import QThread, Qt
from PyQt5.QtWidgets import QApplication, QMainWindow, QMessageBox

from Orchestrator.discovery import discover
from Orchestrator.features.gui import Ui_MainWindow
from Orchestrator.features.version import product_version
from Orchestrator.launch import LaunchOutcome, LaunchSession, LaunchState
from Orchestrator.runtime import humanize, log_event, metrics_snapshot, not_found_message, start_failed_message


class LaunchThread(QThread):
    """Runs one LaunchSession off the GUI thread and relays its callbacks as signals."""

    stateChanged = QtCore.pyqtSignal(str)
    progressed = QtCore.pyqtSignal(str)
    completed = QtCore.pyqtSignal(object)

    def __init__(self, app, parent=None):
        super().__init__(parent)
        self.app = app
        self.session = LaunchSession(
            app.display_name,
            app.resolved_path,
            on_state=lambda state: cast(Any, self.stateChanged).emit(state.value),
            on_progress=lambda p: cast(Any, self.progressed).emit(p.elapsed_text()),
        )

    def run(self):
        try:
            outcome = self.session.run()
        except Exception as e:
            outcome = LaunchOutcome.start_failed(self.app.resolved_path or "", str(e))
        cast(Any, self.completed).emit(outcome)


class Main(QMainWindow):
    def __init__(self, base_dir=None):
        super().__init__()
        self.ui = Ui_MainWindow()
        self.ui.setupUi(self)
        self.ui.exitButton.clicked.connect(self.close)  # type: ignore[attr-defined]
        self.ui.versionTextBlock.setText(f"Version: {product_version()}")
        self._launch_thread = None

        self.apps = discover(base_dir=base_dir)
        for app in self.apps:
            button = self.ui.addAppButton(app.display_name)
            button.clicked.connect(lambda _checked=False, a=app: self.launch(a))  # type: ignore[attr-defined]
        self._refresh_buttons()

    @property
    def busy(self):
        return self._launch_thread is not None

    def _refresh_buttons(self):
        for app in self.apps:
            button = self.ui.appButtons[app.display_name]
            available = app.is_available()
            button.setText(app.label())
            button.setToolTip(app.resolved_path if available else "")
            button.setEnabled(available and not self.busy)
        self.ui.exitButton.setEnabled(not self.busy)

    def _set_busy(self, is_busy, status=None):
        self.ui.busyPanel.setVisible(is_busy)
        self.ui.busyStatusText.setText((status or "Launching…") if is_busy else "")
        if is_busy:
            QApplication.setOverrideCursor(Qt.WaitCursor)
        else:
            QApplication.restoreOverrideCursor()
        self._refresh_buttons()

    def launch(self, app):
        if self.busy:
            return
        thread = LaunchThread(app, self)
        cast(Any, thread.progressed).connect(self._on_progress)
        cast(Any, thread.completed).connect(self._on_completed)
        cast(Any, thread.stateChanged).connect(self._on_state)
        self._launch_thread = thread
        self._set_busy(True, "Launching…")
        thread.start()

    def _on_state(self, state):
        log_event("ui_state", state=state)

    def _on_progress(self, elapsed_text):
        self.ui.busyStatusText.setText(f"Launching… elapsed {elapsed_text}")

    def _on_completed(self, outcome):
        thread = self._launch_thread
        app = thread.app if thread is not None else None
        if thread is not None:
            thread.wait()
            thread.deleteLater()
        self._launch_thread = None
        self._set_busy(False)
        metrics_snapshot()

        name = app.display_name if app is not None else ""
        # Informational outcomes go to the subtitle, not a dialog.
        if outcome.state is LaunchState.TIMED_OUT:
            self.ui.subtitleLabel.setText(humanize("timed_out", name))
        elif outcome.state is LaunchState.CANCELLED:
            self.ui.subtitleLabel.setText(humanize("cancelled", name))
        else:
            self.ui.subtitleLabel.setText("Choose a tool to launch.")

        if outcome.state is LaunchState.NOT_FOUND:
            QMessageBox.warning(self, humanize("not_found"), not_found_message(name, outcome.path))
        elif outcome.state is LaunchState.START_FAILED:
            QMessageBox.critical(self, humanize("start_failed"), start_failed_message(name, outcome.path, outcome.reason))

    def closeEvent(self, event):
        thread = self._launch_thread
        if thread is not None and thread.session.busy:
            thread.session.cancel()
        if thread is not None:
            thread.wait(1500)
        super().closeEvent(event)


def main():
    app = QApplication(sys.argv)
    window = Main()
    window.show()
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
