from PySide6.QtWidgets import QPushButton
from PySide6.QtCore import Qt
from FrontEnd.styles.design_tokens import COLORS, FONTS

class Bubble(QPushButton):
    """Round checkable button used for minute, second and preset choices."""

    def __init__(self, text, color, size, parent=None):
        super().__init__(text, parent)
        self.color = color
        self.setCheckable(True)
        self.setFixedSize(size, size)
        self.setCursor(Qt.PointingHandCursor)
        self._radius = size // 2
        self._apply_style()
        self.toggled.connect(lambda _checked: self._apply_style())

    def _apply_style(self):
        ring = COLORS['selected_ring'] if self.isChecked() else self.color
        width = 3 if self.isChecked() else 1
        self.setStyleSheet(
            f"QPushButton {{ background: {self.color}; color: {COLORS['text']};"
            f" border: {width}px solid {ring}; border-radius: {self._radius}px;"
            f" font-size: {FONTS['bubble_size']}px; font-weight: 600; }}"
        )
