class OutlineError(Exception):
	"""Base class for errors raised around outline generation."""


class MissingSourceError(OutlineError):
	def __init__(self, path: str):
		super().__init__(f"Source file not found: {path}")
		self.path = path
