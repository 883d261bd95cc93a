from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel
from FrontEnd.styles.design_tokens import COLORS, FONTS, STATUS_COLORS

class HistoryBubble(QWidget):
    def __init__(self, session):
        super().__init__()
        layout = QHBoxLayout()
        self.label = QLabel(f"{session.formatted_duration()} - {session.status_text()}")
        self.label.setObjectName("HistoryBubbleLabel")
        layout.addWidget(self.label)
        layout.addStretch()
        self.tag = QLabel(session.label)
        layout.addWidget(self.tag)
        self.setLayout(layout)
        color = STATUS_COLORS[session.status.value]
        self.setStyleSheet(f"background: {color}; border-radius: 25px; padding: 8px 24px; color: {COLORS['text']}; font-size: {FONTS['text']}px; font-weight: 600;")
        self.setMinimumHeight(50)
