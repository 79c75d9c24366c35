# -*- coding: utf-8 -*-

from PyQt5 import QtCore, QtGui, QtWidgets


_BUTTON_QSS = (
    "QPushButton{{"
    "background-color: rgba(58, 170, 255, 220);"
    "color: rgb(8, 22, 40);"
    "font: 700 12pt \"{font}\";"
    "border-radius: 12px;"
    "border: 1px solid rgba(211, 235, 255, 185);"
    "padding: 10px 18px;"
    "text-align: left;"
    "}}"
    "QPushButton:hover{{background-color: rgba(96, 189, 255, 240);}}"
    "QPushButton:pressed{{background-color: rgba(36, 142, 230, 230);}}"
    "QPushButton:disabled{{background-color: rgba(58, 170, 255, 70); color: rgba(5,16,28,120);}}"
)


class Ui_MainWindow(object):
    def setupUi(self, MainWindow):
        MainWindow.setObjectName("PowerStigOrchestrator")
        MainWindow.resize(560, 440)
        MainWindow.setStyleSheet("QMainWindow{background-color: rgb(6, 12, 24);}")

        self.primary_font = "Segoe UI Variable Text"
        if not QtGui.QFont(self.primary_font).exactMatch():
            self.primary_font = "Segoe UI"
        primary_font = self.primary_font

        panel_qss = (
            "QFrame{"
            "background-color: rgba(10, 18, 34, 190);"
            "border: 1px solid rgba(58, 170, 255, 130);"
            "border-radius: 18px;"
            "}"
        )

        self.centralwidget = QtWidgets.QWidget(MainWindow)
        self.centralwidget.setObjectName("centralwidget")

        outer = QtWidgets.QVBoxLayout(self.centralwidget)
        outer.setContentsMargins(22, 18, 22, 18)
        outer.setSpacing(14)

        self.hudFrame = QtWidgets.QFrame(self.centralwidget)
        self.hudFrame.setStyleSheet(panel_qss)
        self.hudFrame.setFrameShape(QtWidgets.QFrame.StyledPanel)
        self.hudFrame.setObjectName("hudFrame")

        hud_layout = QtWidgets.QVBoxLayout(self.hudFrame)
        hud_layout.setContentsMargins(22, 18, 22, 18)
        hud_layout.setSpacing(10)

        self.titleLabel = QtWidgets.QLabel(self.hudFrame)
        self.titleLabel.setStyleSheet(
            "color: rgb(232, 244, 255);"
            f"font: 700 20pt \"{primary_font}\";"
            "border: none;"
        )
        self.titleLabel.setObjectName("titleLabel")

        self.subtitleLabel = QtWidgets.QLabel(self.hudFrame)
        self.subtitleLabel.setStyleSheet(
            "color: rgba(116, 196, 255, 225);"
            f"font: 10pt \"{primary_font}\";"
            "border: none;"
        )
        self.subtitleLabel.setObjectName("subtitleLabel")

        self.appsLayout = QtWidgets.QVBoxLayout()
        self.appsLayout.setSpacing(10)

        hud_layout.addWidget(self.titleLabel)
        hud_layout.addWidget(self.subtitleLabel)
        hud_layout.addLayout(self.appsLayout)
        hud_layout.addStretch(1)

        self.busyPanel = QtWidgets.QFrame(self.centralwidget)
        self.busyPanel.setStyleSheet(panel_qss)
        self.busyPanel.setFrameShape(QtWidgets.QFrame.StyledPanel)
        self.busyPanel.setObjectName("busyPanel")

        busy_layout = QtWidgets.QVBoxLayout(self.busyPanel)
        busy_layout.setContentsMargins(18, 10, 18, 10)
        busy_layout.setSpacing(6)

        self.busyBar = QtWidgets.QProgressBar(self.busyPanel)
        # Zero range renders the indeterminate "busy" animation.
        self.busyBar.setRange(0, 0)
        self.busyBar.setTextVisible(False)
        self.busyBar.setMaximumHeight(8)
        self.busyBar.setObjectName("busyBar")

        self.busyStatusText = QtWidgets.QLabel(self.busyPanel)
        self.busyStatusText.setStyleSheet(
            "color: rgba(214, 236, 255, 228);"
            f"font: 10pt \"{primary_font}\";"
            "border: none;"
        )
        self.busyStatusText.setObjectName("busyStatusText")

        busy_layout.addWidget(self.busyBar)
        busy_layout.addWidget(self.busyStatusText)
        self.busyPanel.setVisible(False)

        bottom_layout = QtWidgets.QHBoxLayout()
        bottom_layout.setSpacing(12)

        self.versionTextBlock = QtWidgets.QLabel(self.centralwidget)
        self.versionTextBlock.setStyleSheet(
            "color: rgba(191, 218, 243, 170);"
            f"font: 9pt \"{primary_font}\";"
        )
        self.versionTextBlock.setObjectName("versionTextBlock")

        self.exitButton = QtWidgets.QPushButton(self.centralwidget)
        self.exitButton.setMinimumSize(QtCore.QSize(96, 36))
        self.exitButton.setCursor(QtGui.QCursor(QtCore.Qt.PointingHandCursor))
        self.exitButton.setStyleSheet(_BUTTON_QSS.format(font=primary_font))
        self.exitButton.setObjectName("exitButton")

        bottom_layout.addWidget(self.versionTextBlock, 1)
        bottom_layout.addWidget(
            self.exitButton,
            0,
            QtCore.Qt.AlignRight | QtCore.Qt.AlignVCenter,  # type: ignore[arg-type]
        )

        outer.addWidget(self.hudFrame, 1)
        outer.addWidget(self.busyPanel)
        outer.addLayout(bottom_layout)

        shadow = QtWidgets.QGraphicsDropShadowEffect(self.centralwidget)
        shadow.setBlurRadius(24)
        shadow.setOffset(0, 0)
        shadow.setColor(QtGui.QColor(58, 170, 255, 65))
        self.hudFrame.setGraphicsEffect(shadow)

        MainWindow.setCentralWidget(self.centralwidget)

        self.appButtons = {}

        self.retranslateUi(MainWindow)
        QtCore.QMetaObject.connectSlotsByName(MainWindow)

    def addAppButton(self, display_name):
        button = QtWidgets.QPushButton(self.hudFrame)
        button.setMinimumSize(QtCore.QSize(240, 44))
        button.setCursor(QtGui.QCursor(QtCore.Qt.PointingHandCursor))
        button.setStyleSheet(_BUTTON_QSS.format(font=self.primary_font))
        button.setObjectName("appButton_" + "".join(ch for ch in display_name if ch.isalnum()))
        button.setText(display_name)
        self.appsLayout.addWidget(button)
        self.appButtons[display_name] = button
        return button

    def retranslateUi(self, MainWindow):
        _translate = QtCore.QCoreApplication.translate
        MainWindow.setWindowTitle(_translate("MainWindow", "PowerStig Orchestrator"))
        self.titleLabel.setText(_translate("MainWindow", "PowerStig Orchestrator"))
        self.subtitleLabel.setText(_translate("MainWindow", "Choose a tool to launch."))
        self.exitButton.setText(_translate("MainWindow", "Exit"))
        self.versionTextBlock.setText(_translate("MainWindow", "Version: unknown"))
