import os
from pathlib import Path

def user_data_dir(app_name="BubbleTimer"):
	"""Return per-user data dir (Windows/macOS/Linux), BUBBLE_TIMER_DATA_DIR wins."""
	override = os.environ.get("BUBBLE_TIMER_DATA_DIR")
	if override:
		path = Path(override)
	else:
		if os.name == "nt":
			base = os.environ.get("LOCALAPPDATA", os.path.expanduser("~\\AppData\\Local"))
		elif os.name == "posix":
			base = os.environ.get("XDG_DATA_HOME", os.path.expanduser("~/.local/share"))
		else:
			base = os.path.expanduser("~")
		path = Path(base) / app_name
	path.mkdir(parents=True, exist_ok=True)
	return path

def store_path():
	"""Return Path to the key-value JSON file inside user data dir."""
	return user_data_dir() / "bubble_timer.json"
