import logging

from PySide6.QtCore import QObject, Signal, QTimer

from BackEnd.core.clock import estimated_finish
from BackEnd.core.selector import DurationSelector
from BackEnd.core.session import SessionStatus, TimerSession
from BackEnd.repos.history_repo import DISPLAY_LIMIT

logger = logging.getLogger(__name__)

TICK_INTERVAL_MS = 1000

IDLE = "idle"
ACTIVE = SessionStatus.ACTIVE.value
PAUSED = SessionStatus.PAUSED.value
FINISHED = SessionStatus.FINISHED.value
CANCELLED = SessionStatus.CANCELLED.value


class TimerService(QObject):
	"""Countdown engine owning the single current session.

	Transitions write the head history entry's status before any signal is
	emitted. Calls made in the wrong state return False and change nothing.
	"""

	remaining_changed = Signal(int)  # emits remaining seconds
	state_changed = Signal(str)  # emits 'idle', 'active', 'paused', 'finished', 'cancelled'
	history_changed = Signal()
	selection_changed = Signal()

	def __init__(self, history, timer=None, selector=None, parent=None):
		super().__init__(parent)
		self._history = history
		self._selector = selector if selector is not None else DurationSelector()
		self._state = IDLE
		self._running = False
		self._remaining = 0
		self._total = 0
		if timer is None:
			timer = QTimer(self)
			timer.setInterval(TICK_INTERVAL_MS)
		self._timer = timer
		self._timer.timeout.connect(self.tick)

	# --- read-only view ---

	@property
	def state(self):
		return self._state

	@property
	def running(self):
		return self._running

	@property
	def remaining(self):
		return self._remaining

	@property
	def total_duration(self):
		return self._total

	@property
	def selector(self):
		return self._selector

	@property
	def history(self):
		return self._history

	def recent_history(self, limit=DISPLAY_LIMIT):
		return self._history.recent(limit)

	def selected_time(self):
		"""Committed total while a session is underway, else the pending selection."""
		return self._total if self._total > 0 else self._selector.total_seconds()

	def progress(self):
		"""Fraction of the session still left, 0.0 when nothing is loaded."""
		if self._total <= 0:
			return 0.0
		return self._remaining / self._total

	def estimated_finish_time(self, now=None):
		return estimated_finish(self._remaining, now)

	# --- selection ---

	def select_minutes(self, minutes):
		self._selector.select_minutes(minutes)
		self.selection_changed.emit()

	def select_seconds(self, seconds):
		self._selector.select_seconds(seconds)
		self.selection_changed.emit()

	def select_preset(self, name):
		if not self._selector.select_preset(name):
			logger.debug("Ignoring unknown preset %r", name)
			return False
		self.selection_changed.emit()
		return True

	def set_custom_time(self, minutes, seconds):
		"""Commit a custom duration; returns the validation message on rejection."""
		error = self._selector.commit_custom(minutes, seconds)
		if error is None:
			self.selection_changed.emit()
		return error

	# --- transitions ---

	def start(self):
		if self._state in (ACTIVE, PAUSED):
			logger.debug("start() ignored while %s", self._state)
			return False
		self._total = self._selector.total_seconds()
		self._remaining = self._total
		self._running = True
		self._state = ACTIVE
		self._history.append(TimerSession.new(self._total, self._selector.label()))
		self._restart_timer()
		logger.info("Timer started: %ss", self._total)
		self.history_changed.emit()
		self.state_changed.emit(ACTIVE)
		self.remaining_changed.emit(self._remaining)
		return True

	def pause(self):
		if not self._running:
			logger.debug("pause() ignored while %s", self._state)
			return False
		self._timer.stop()
		self._running = False
		self._state = PAUSED
		self._set_head_status(SessionStatus.PAUSED)
		logger.info("Timer paused with %ss left", self._remaining)
		self.state_changed.emit(PAUSED)
		return True

	def resume(self):
		if self._running or self._state != PAUSED or self._remaining <= 0:
			logger.debug("resume() ignored while %s", self._state)
			return False
		self._running = True
		self._state = ACTIVE
		self._set_head_status(SessionStatus.ACTIVE)
		self._restart_timer()
		logger.info("Timer resumed with %ss left", self._remaining)
		self.state_changed.emit(ACTIVE)
		return True

	def cancel(self):
		if self._state not in (ACTIVE, PAUSED):
			logger.debug("cancel() ignored while %s", self._state)
			return False
		self._timer.stop()
		self._running = False
		self._remaining = 0
		self._total = 0
		self._state = CANCELLED
		self._set_head_status(SessionStatus.CANCELLED)
		logger.info("Timer cancelled")
		self.state_changed.emit(CANCELLED)
		self.remaining_changed.emit(0)
		return True

	def clear_history(self):
		self._history.clear()
		logger.info("History cleared")
		self.history_changed.emit()

	def tick(self):
		"""One countdown step; the timer calls this every TICK_INTERVAL_MS."""
		if not self._running:
			return
		if self._remaining > 0:
			self._remaining -= 1
			self.remaining_changed.emit(self._remaining)
		if self._remaining == 0:
			self._finish()

	def _finish(self):
		self._timer.stop()
		self._running = False
		self._state = FINISHED
		self._set_head_status(SessionStatus.FINISHED)
		logger.info("Timer finished")
		self.state_changed.emit(FINISHED)

	def _restart_timer(self):
		# at most one live timeout source per engine
		self._timer.stop()
		self._timer.start()

	def _set_head_status(self, status):
		if self._history.update_head_status(status):
			self.history_changed.emit()
