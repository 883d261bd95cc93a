from PySide6.QtWidgets import (
    QDialog, QFormLayout, QLineEdit, QLabel, QPushButton, QHBoxLayout, QVBoxLayout
)
from PySide6.QtGui import QIntValidator
from BackEnd.core.selector import parse_custom_time
from FrontEnd.styles.design_tokens import COLORS

class CustomTimeDialog(QDialog):
    """Form for a custom minutes/seconds duration with an inline error line."""

    def __init__(self, timer_service, parent=None):
        super().__init__(parent)
        self.timer_service = timer_service
        self.setWindowTitle("Custom Timer")

        self.minutes_edit = QLineEdit()
        self.minutes_edit.setPlaceholderText("Minutes")
        self.minutes_edit.setValidator(QIntValidator(0, 999, self))
        self.seconds_edit = QLineEdit()
        self.seconds_edit.setPlaceholderText("Seconds")
        self.seconds_edit.setValidator(QIntValidator(0, 999, self))

        form = QFormLayout()
        form.addRow("Minutes", self.minutes_edit)
        form.addRow("Seconds", self.seconds_edit)

        self.error_label = QLabel("")
        self.error_label.setStyleSheet(f"color: {COLORS['error']};")
        self.error_label.setVisible(False)

        self.set_btn = QPushButton("Set Timer")
        self.set_btn.setEnabled(False)
        cancel_btn = QPushButton("Cancel")
        buttons = QHBoxLayout()
        buttons.addStretch()
        buttons.addWidget(cancel_btn)
        buttons.addWidget(self.set_btn)

        layout = QVBoxLayout()
        layout.addLayout(form)
        layout.addWidget(self.error_label)
        layout.addLayout(buttons)
        self.setLayout(layout)

        self.minutes_edit.textChanged.connect(self._update_set_enabled)
        self.seconds_edit.textChanged.connect(self._update_set_enabled)
        self.set_btn.clicked.connect(self._submit)
        cancel_btn.clicked.connect(self.reject)

    def _update_set_enabled(self):
        # both fields blank means nothing to submit
        self.set_btn.setEnabled(bool(self.minutes_edit.text() or self.seconds_edit.text()))

    def _submit(self):
        minutes, seconds = parse_custom_time(self.minutes_edit.text(), self.seconds_edit.text())
        error = self.timer_service.set_custom_time(minutes, seconds)
        if error:
            self.error_label.setText(error)
            self.error_label.setVisible(True)
            return
        self.error_label.setVisible(False)
        self.accept()
