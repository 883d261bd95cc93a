"""Pending duration picked by the user for the next countdown."""

PRESETS = {
	"1m": (1, 0),
	"5m": (5, 0),
	"10m": (10, 0),
}
CUSTOM_PRESET = "Custom"

ERR_RANGE = "Please enter valid time (0-59 seconds)"
ERR_ZERO = "Time cannot be zero"


def parse_custom_time(minutes_text, seconds_text):
	"""Turn the custom form's text fields into ints; blank or junk counts as 0."""
	def _to_int(text):
		try:
			return int(str(text).strip())
		except ValueError:
			return 0
	return _to_int(minutes_text), _to_int(seconds_text)


def validate_custom_time(minutes, seconds):
	"""Return the message to show for an invalid custom time, or None."""
	if minutes < 0 or seconds < 0 or seconds >= 60:
		return ERR_RANGE
	if minutes == 0 and seconds == 0:
		return ERR_ZERO
	return None


class DurationSelector:
	def __init__(self, minutes=1, seconds=5, preset=None):
		self.minutes = minutes
		self.seconds = seconds
		self.preset = preset

	def select_minutes(self, minutes):
		self.minutes = minutes
		self.preset = None

	def select_seconds(self, seconds):
		self.seconds = seconds
		self.preset = None

	def select_preset(self, name):
		"""Apply a named preset. Unknown names leave the selection untouched."""
		if name not in PRESETS:
			return False
		self.minutes, self.seconds = PRESETS[name]
		self.preset = name
		return True

	def commit_custom(self, minutes, seconds):
		"""Store a custom time. Returns the validation message on rejection."""
		error = validate_custom_time(minutes, seconds)
		if error is not None:
			return error
		self.minutes = minutes
		self.seconds = seconds
		self.preset = CUSTOM_PRESET
		return None

	def total_seconds(self):
		return self.minutes * 60 + self.seconds

	def label(self):
		"""Preset tag verbatim, otherwise MM:SS of the selected values."""
		if self.preset is not None:
			return self.preset
		return f"{self.minutes:02d}:{self.seconds:02d}"
