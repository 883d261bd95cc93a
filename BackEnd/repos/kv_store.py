"""Small durable key-value store backed by one JSON file."""
import json
import os
from pathlib import Path


class JsonFileStore:
	def __init__(self, path):
		self.path = Path(path)

	def _read(self):
		if not self.path.exists():
			return {}
		with open(self.path, encoding="utf-8") as f:
			data = json.load(f)
		if not isinstance(data, dict):
			raise ValueError(f"{self.path} does not hold a JSON object")
		return data

	def _write(self, data):
		self.path.parent.mkdir(parents=True, exist_ok=True)
		tmp = self.path.with_name(self.path.name + ".tmp")
		with open(tmp, "w", encoding="utf-8") as f:
			json.dump(data, f, indent=2)
		os.replace(tmp, self.path)

	def get(self, key, default=None):
		return self._read().get(key, default)

	def _read_or_reset(self):
		try:
			return self._read()
		except ValueError:
			# unreadable file is replaced rather than blocking every write
			return None

	def set(self, key, value):
		data = self._read_or_reset() or {}
		data[key] = value
		self._write(data)

	def remove(self, key):
		data = self._read_or_reset()
		if data is None:
			self._write({})
		elif key in data:
			del data[key]
			self._write(data)
