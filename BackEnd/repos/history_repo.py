"""Most-recent-first log of timer sessions, mirrored to a key-value store."""
import logging

from BackEnd.core.session import TimerSession

logger = logging.getLogger(__name__)

HISTORY_KEY = "timerHistory"
DISPLAY_LIMIT = 10


class HistoryStore:
	"""Append-at-front session log. Only the head entry is ever mutated.

	Every mutation rewrites the whole list under `key`. Storage errors are
	logged and swallowed here so callers never see them.
	"""

	def __init__(self, store, key=HISTORY_KEY):
		self._store = store
		self._key = key
		self._sessions = []

	@property
	def sessions(self):
		"""Read-only snapshot, most recent first."""
		return tuple(self._sessions)

	@property
	def head(self):
		return self._sessions[0] if self._sessions else None

	def __len__(self):
		return len(self._sessions)

	def recent(self, limit=DISPLAY_LIMIT):
		return tuple(self._sessions[:limit])

	def append(self, session):
		self._sessions.insert(0, session)
		self.persist()

	def update_head_status(self, status):
		"""Set the head entry's status. Returns False when the log is empty."""
		if not self._sessions:
			return False
		self._sessions[0].status = status
		self.persist()
		return True

	def persist(self):
		records = [s.to_record() for s in self._sessions]
		try:
			self._store.set(self._key, records)
		except (OSError, TypeError, ValueError):
			logger.exception("Could not save %d history entries", len(records))
			return False
		return True

	def load(self):
		"""Replace the in-memory log with the stored one; empty on any failure."""
		self._sessions = []
		try:
			records = self._store.get(self._key)
		except (OSError, ValueError):
			logger.warning("Stored history is unreadable, starting empty", exc_info=True)
			return self.sessions
		if records is None:
			return self.sessions
		if not isinstance(records, list):
			logger.warning("Stored history under %r is not a list, starting empty", self._key)
			return self.sessions
		for record in records:
			try:
				self._sessions.append(TimerSession.from_record(record))
			except ValueError as e:
				logger.warning("Skipping history record: %s", e)
		logger.debug("Loaded %d history entries", len(self._sessions))
		return self.sessions

	def clear(self):
		self._sessions = []
		try:
			self._store.remove(self._key)
		except (OSError, ValueError):
			logger.exception("Could not remove stored history")
			return False
		return True
