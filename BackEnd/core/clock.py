from datetime import datetime, timezone, timedelta

def utc_now_iso():
	"""Return current UTC time as ISO8601 string (no microseconds)."""
	return datetime.now(timezone.utc).replace(microsecond=0).isoformat()

def fmt_mmss(seconds) -> str:
	"""Format seconds as MM:SS (minutes are not wrapped into hours)."""
	seconds = max(0, int(seconds))
	m, s = divmod(seconds, 60)
	return f"{m:02}:{s:02}"

def estimated_finish(remaining, now=None) -> str:
	"""Return local HH:MM at which a countdown with `remaining` seconds ends."""
	if now is None:
		now = datetime.now()
	return (now + timedelta(seconds=remaining)).strftime("%H:%M")
