"""History entry model and its persisted record shape."""
import math
import uuid
from enum import Enum

from BackEnd.core.clock import utc_now_iso, fmt_mmss


class SessionStatus(str, Enum):
	ACTIVE = "active"
	PAUSED = "paused"
	FINISHED = "finished"
	CANCELLED = "cancelled"


STATUS_TEXT = {
	SessionStatus.FINISHED: "Finished ✅",
	SessionStatus.CANCELLED: "Cancelled ❌",
	SessionStatus.ACTIVE: "Active ⏳",
	SessionStatus.PAUSED: "Paused ⏸",
}


class TimerSession:
	"""One countdown attempt. Only `status` changes after creation."""

	__slots__ = ("_id", "_duration", "_created_at", "status", "_label")

	def __init__(self, id, duration, created_at, status, label):
		self._id = id
		self._duration = duration
		self._created_at = created_at
		self.status = SessionStatus(status)
		self._label = label

	@classmethod
	def new(cls, duration, label):
		"""Create an Active session stamped with a fresh id and the current time."""
		return cls(uuid.uuid4().hex, duration, utc_now_iso(), SessionStatus.ACTIVE, label)

	@property
	def id(self):
		return self._id

	@property
	def duration(self):
		return self._duration

	@property
	def created_at(self):
		return self._created_at

	@property
	def label(self):
		return self._label

	def formatted_duration(self):
		return fmt_mmss(self._duration)

	def status_text(self):
		return STATUS_TEXT[self.status]

	def to_record(self):
		return {
			"id": self._id,
			"duration": self._duration,
			"date": self._created_at,
			"status": self.status.value,
			"label": self._label,
		}

	@classmethod
	def from_record(cls, record):
		"""Build a session from a stored dict.

		Raises ValueError for unknown status tags, missing fields or a duration
		that is not a finite, non-negative number.
		"""
		if not isinstance(record, dict):
			raise ValueError(f"session record must be an object, got {type(record).__name__}")
		try:
			duration = record["duration"]
			if isinstance(duration, bool) or not isinstance(duration, (int, float)) \
					or (isinstance(duration, float) and not math.isfinite(duration)) or duration < 0:
				raise ValueError(f"invalid duration {duration!r}")
			return cls(
				str(record["id"]),
				duration,
				str(record["date"]),
				SessionStatus(record["status"]),
				str(record["label"]),
			)
		except KeyError as e:
			raise ValueError(f"session record missing field {e.args[0]!r}") from e

	def __eq__(self, other):
		if not isinstance(other, TimerSession):
			return NotImplemented
		return self.to_record() == other.to_record()

	def __repr__(self):
		return f"TimerSession(id={self._id!r}, duration={self._duration!r}, status={self.status.value!r}, label={self._label!r})"
