from PySide6.QtWidgets import (
	QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
	QTabWidget, QScrollArea, QButtonGroup, QSizePolicy
)
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure
from PySide6.QtCore import Qt
from BackEnd.core.clock import fmt_mmss
from BackEnd.core.selector import PRESETS
from BackEnd.core.session import SessionStatus
from BackEnd.services.timer_service import ACTIVE, PAUSED
from FrontEnd.components.bubble import Bubble
from FrontEnd.components.custom_time_dialog import CustomTimeDialog
from FrontEnd.components.history_bubble import HistoryBubble
from FrontEnd.styles.design_tokens import COLORS, FONTS, STATUS_COLORS, BUBBLE_SIZES, countdown_color

MINUTE_CHOICES = range(1, 61)
SECOND_CHOICES = range(5, 61, 5)
CUSTOM_BUBBLE = "+"

TIMER_TAB, COUNTDOWN_TAB, HISTORY_TAB = range(3)


class MainWindow(QMainWindow):
	def __init__(self, timer_service):
		super().__init__()
		self.setWindowTitle("Bubble Timer")
		self.resize(480, 760)
		self.setStyleSheet(
			f"QMainWindow, QTabWidget::pane {{ background: qlineargradient(x1:0, y1:0, x2:0, y2:1,"
			f" stop:0 {COLORS['background_top']}, stop:1 {COLORS['background_bottom']}); }}"
			f" QWidget {{ font-family: {FONTS['family']}; }}"
			f" QLabel {{ color: {COLORS['text']}; }}"
		)

		self.timer_service = timer_service

		self.tabs = QTabWidget()
		self.tabs.setTabPosition(QTabWidget.TabPosition.South)
		self.tabs.addTab(self._build_timer_tab(), "Timer")
		self.tabs.addTab(self._build_countdown_tab(), "Countdown")
		self.tabs.addTab(self._build_history_tab(), "History")
		self.setCentralWidget(self.tabs)

		self.timer_service.remaining_changed.connect(self._on_remaining)
		self.timer_service.state_changed.connect(self._on_state)
		self.timer_service.history_changed.connect(self._refresh_history)
		self.timer_service.selection_changed.connect(self._sync_selection)

		self._sync_selection()
		self._on_state(self.timer_service.state)
		self._on_remaining(self.timer_service.remaining)
		self._refresh_history()

	def _bubble_row(self, bubbles):
		row = QWidget()
		row_layout = QHBoxLayout()
		row_layout.setSpacing(14)
		row_layout.setContentsMargins(16, 12, 16, 12)
		for b in bubbles:
			row_layout.addWidget(b)
		row.setLayout(row_layout)
		scroll = QScrollArea()
		scroll.setWidget(row)
		scroll.setWidgetResizable(True)
		scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarAsNeeded)
		scroll.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
		scroll.setFrameShape(QScrollArea.Shape.NoFrame)
		scroll.setStyleSheet("background: transparent;")
		scroll.setFixedHeight(row.sizeHint().height() + 16)
		return scroll

	def _build_timer_tab(self):
		w = QWidget()
		layout = QVBoxLayout()
		layout.setContentsMargins(0, 24, 0, 24)

		title = QLabel("Bubble Timer")
		title.setAlignment(Qt.AlignmentFlag.AlignCenter)
		title.setStyleSheet(f"font-size: {FONTS['title_size']}px; font-weight: bold;")
		layout.addWidget(title)
		layout.addStretch()

		# exclusive groups keep a single checked bubble per row; the service
		# stays the source of truth via _sync_selection
		self.minute_bubbles = {}
		self.minute_group = QButtonGroup(self)
		for minute in MINUTE_CHOICES:
			b = Bubble(str(minute), COLORS['minute_bubble'], BUBBLE_SIZES['picker'])
			b.clicked.connect(lambda _=False, m=minute: self.timer_service.select_minutes(m))
			self.minute_group.addButton(b)
			self.minute_bubbles[minute] = b
		layout.addWidget(self._bubble_row(self.minute_bubbles.values()))

		self.second_bubbles = {}
		self.second_group = QButtonGroup(self)
		for second in SECOND_CHOICES:
			b = Bubble(str(second), COLORS['second_bubble'], BUBBLE_SIZES['preset'])
			b.clicked.connect(lambda _=False, s=second: self.timer_service.select_seconds(s))
			self.second_group.addButton(b)
			self.second_bubbles[second] = b
		layout.addWidget(self._bubble_row(self.second_bubbles.values()))

		self.preset_bubbles = {}
		self.preset_group = QButtonGroup(self)
		for name in list(PRESETS) + [CUSTOM_BUBBLE]:
			b = Bubble(name, COLORS['preset_bubble'], BUBBLE_SIZES['preset'])
			if name == CUSTOM_BUBBLE:
				b.setCheckable(False)
				b.clicked.connect(self._open_custom_dialog)
			else:
				b.clicked.connect(lambda _=False, n=name: self.timer_service.select_preset(n))
				self.preset_group.addButton(b)
			self.preset_bubbles[name] = b
		layout.addWidget(self._bubble_row(self.preset_bubbles.values()))

		self.selection_label = QLabel("")
		self.selection_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
		self.selection_label.setStyleSheet(f"color: {COLORS['text_muted']}; font-size: {FONTS['text']}px;")
		layout.addWidget(self.selection_label)

		self.start_btn = QPushButton("Start")
		size = BUBBLE_SIZES['start']
		self.start_btn.setFixedSize(size, size)
		self.start_btn.setCursor(Qt.PointingHandCursor)
		self.start_btn.setStyleSheet(
			f"background: {COLORS['start_bubble']}; color: {COLORS['text']}; border-radius: {size // 2}px;"
			f" font-size: 18px; font-weight: bold;"
		)
		self.start_btn.clicked.connect(self._start)
		layout.addSpacing(24)
		layout.addWidget(self.start_btn, alignment=Qt.AlignmentFlag.AlignHCenter)
		layout.addStretch()

		w.setLayout(layout)
		return w

	def _build_countdown_tab(self):
		w = QWidget()
		layout = QVBoxLayout()
		layout.setContentsMargins(32, 32, 32, 32)
		layout.addStretch()

		size = BUBBLE_SIZES['countdown']
		self.countdown_label = QLabel("00:00")
		self.countdown_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
		self.countdown_label.setFixedSize(size, size)
		layout.addWidget(self.countdown_label, alignment=Qt.AlignmentFlag.AlignHCenter)

		btn_layout = QHBoxLayout()
		btn_layout.setSpacing(40)
		self.play_pause_btn = QPushButton("Start")
		self.cancel_btn = QPushButton("Cancel")
		for btn in (self.play_pause_btn, self.cancel_btn):
			btn.setFixedSize(70, 70)
			btn.setCursor(Qt.PointingHandCursor)
			btn_layout.addWidget(btn)
		self.play_pause_btn.setStyleSheet(f"background: {COLORS['countdown_mid']}; color: {COLORS['text']}; border-radius: 35px; font-weight: bold;")
		self.cancel_btn.setStyleSheet(f"background: rgba(255, 0, 0, 0.7); color: {COLORS['text']}; border-radius: 35px; font-weight: bold;")
		layout.addSpacing(40)
		layout.addLayout(btn_layout)

		self.finish_label = QLabel("")
		self.finish_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
		self.finish_label.setStyleSheet(f"color: {COLORS['text_muted']};")
		layout.addSpacing(30)
		layout.addWidget(self.finish_label)
		layout.addStretch()

		self.play_pause_btn.clicked.connect(self._play_pause)
		self.cancel_btn.clicked.connect(self.timer_service.cancel)

		w.setLayout(layout)
		return w

	def _build_history_tab(self):
		w = QWidget()
		layout = QVBoxLayout()
		layout.setAlignment(Qt.AlignmentFlag.AlignTop)
		layout.setContentsMargins(16, 16, 16, 16)

		header = QHBoxLayout()
		title = QLabel("History")
		title.setStyleSheet(f"font-size: {FONTS['title_size']}px; font-weight: bold;")
		header.addWidget(title)
		header.addStretch()
		self.clear_btn = QPushButton("Clear history")
		self.clear_btn.setFixedSize(110, 36)
		self.clear_btn.setStyleSheet(f"background: {COLORS['clear_button_bg']}; color: {COLORS['text']}; border-radius: 18px;")
		self.clear_btn.clicked.connect(self.timer_service.clear_history)
		header.addWidget(self.clear_btn)
		layout.addLayout(header)

		# Status chart (matplotlib)
		self.figure = Figure(figsize=(4, 2))
		self.canvas = FigureCanvas(self.figure)
		self.canvas.setStyleSheet("background: transparent;")
		layout.addWidget(self.canvas)

		self.history_list = QWidget()
		self.history_layout = QVBoxLayout()
		self.history_layout.setSpacing(14)
		self.history_layout.setAlignment(Qt.AlignmentFlag.AlignTop)
		self.history_list.setLayout(self.history_layout)
		scroll = QScrollArea()
		scroll.setWidget(self.history_list)
		scroll.setWidgetResizable(True)
		scroll.setFrameShape(QScrollArea.Shape.NoFrame)
		scroll.setStyleSheet("background: transparent;")
		scroll.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
		layout.addWidget(scroll)

		w.setLayout(layout)
		return w

	def _open_custom_dialog(self):
		dialog = CustomTimeDialog(self.timer_service, self)
		dialog.exec()

	def _start(self):
		if self.timer_service.start():
			self.tabs.setCurrentIndex(COUNTDOWN_TAB)

	def _play_pause(self):
		svc = self.timer_service
		if svc.running:
			svc.pause()
		elif svc.remaining > 0:
			svc.resume()
		else:
			svc.start()

	def _sync_selection(self):
		sel = self.timer_service.selector
		# manual bubbles only show as selected when no preset tag is set
		manual = sel.preset is None
		for group, bubbles, value in (
			(self.minute_group, self.minute_bubbles, sel.minutes),
			(self.second_group, self.second_bubbles, sel.seconds),
		):
			group.setExclusive(False)
			for key, b in bubbles.items():
				b.setChecked(manual and key == value)
			group.setExclusive(True)
		self.preset_group.setExclusive(False)
		for name, b in self.preset_bubbles.items():
			if b.isCheckable():
				b.setChecked(sel.preset == name)
		self.preset_group.setExclusive(True)
		self.selection_label.setText(f"{sel.label()} ({fmt_mmss(sel.total_seconds())})")

	def _on_remaining(self, remaining):
		svc = self.timer_service
		size = BUBBLE_SIZES['countdown']
		color = countdown_color(svc.progress())
		self.countdown_label.setText(fmt_mmss(remaining))
		self.countdown_label.setStyleSheet(
			f"background: {color}; border-radius: {size // 2}px; color: {COLORS['text']};"
			f" font-size: {FONTS['countdown_size']}px; font-weight: {FONTS['countdown_weight']};"
		)
		self.finish_label.setText(f"Estimated finish: {svc.estimated_finish_time()}" if svc.running else "")

	def _on_state(self, state):
		if state == ACTIVE:
			self.play_pause_btn.setText("Pause")
			self.cancel_btn.setEnabled(True)
		elif state == PAUSED:
			self.play_pause_btn.setText("Resume")
			self.cancel_btn.setEnabled(True)
		else:
			self.play_pause_btn.setText("Start")
			self.cancel_btn.setEnabled(False)
		self._on_remaining(self.timer_service.remaining)

	def _refresh_history(self):
		while self.history_layout.count():
			item = self.history_layout.takeAt(0)
			if item.widget() is not None:
				item.widget().deleteLater()
		for session in self.timer_service.recent_history():
			self.history_layout.addWidget(HistoryBubble(session))
		self._update_status_chart()

	def _update_status_chart(self):
		minutes = {status: 0.0 for status in SessionStatus}
		for session in self.timer_service.history.sessions:
			minutes[session.status] += session.duration / 60

		self.figure.clear()
		self.figure.patch.set_alpha(0.0)
		ax = self.figure.add_subplot(111)
		ax.set_facecolor('none')
		x = [status.value.capitalize() for status in SessionStatus]
		y = [minutes[status] for status in SessionStatus]
		bars = ax.bar(x, y, color=[STATUS_COLORS[status.value] for status in SessionStatus], alpha=0.85)

		for bar, value in zip(bars, y):
			if value > 0:
				ax.text(bar.get_x() + bar.get_width()/2, bar.get_height(),
				       f'{value:.0f}m', ha='center', va='bottom',
				       fontsize=9, fontweight='600', color=COLORS['text'])

		ax.set_ylabel("Minutes", fontsize=10, color=COLORS['text'])
		ax.set_ylim(bottom=0)
		ax.tick_params(axis='both', colors=COLORS['text'], labelsize=9)
		for spine in ['top', 'right']:
			ax.spines[spine].set_visible(False)
		for spine in ['bottom', 'left']:
			ax.spines[spine].set_color(COLORS['text_muted'])

		self.figure.tight_layout()
		self.canvas.draw()
